"""Repository layer - data access abstractions and implementations."""

from stock_dashboard.repositories.protocols import (
    QuoteCache,
    HoldingRepository,
)

__all__ = [
    "QuoteCache",
    "HoldingRepository",
]
