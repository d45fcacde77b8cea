"""Sinks that receive per-symbol quote fetch failures."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class QuoteFailureSink(Protocol):
    """Receives one report per symbol whose quote could not be fetched."""

    def report(self, symbol: str, message: str) -> None:
        ...


class LoggingFailureSink:
    """Reports failures to the application log at ERROR level."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def report(self, symbol: str, message: str) -> None:
        self._log.error("Alpha Vantage Error (%s): %s", symbol, message)
