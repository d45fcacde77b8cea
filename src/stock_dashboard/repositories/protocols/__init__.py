"""Repository protocol definitions (interfaces)."""

from stock_dashboard.repositories.protocols.quote_cache import (
    QuoteCache,
    DEFAULT_QUOTE_TTL_SECONDS,
)
from stock_dashboard.repositories.protocols.holding_repo import HoldingRepository

__all__ = [
    "QuoteCache",
    "DEFAULT_QUOTE_TTL_SECONDS",
    "HoldingRepository",
]
