"""Holding repository protocol."""

from typing import Protocol

from stock_dashboard.domain.models import Holding


class HoldingRepository(Protocol):
    """Read-only source of portfolio holdings."""

    def list_holdings(self) -> list[Holding]:
        """Return holdings in source order; empty if the source is unusable."""
        ...
