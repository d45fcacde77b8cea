"""Portfolio holding model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Holding:
    """
    One portfolio line item as read from the holdings file.

    Never mutated while a summary is being computed.
    """

    symbol: str
    quantity: Decimal
    purchase_price: Optional[Decimal] = None


def normalize_symbol(symbol: Optional[str]) -> str:
    """Canonical ticker form used for cache keys and quote lookups."""
    return (symbol or "").strip().upper()
