"""Domain models package."""

from stock_dashboard.domain.models.enums import QuoteFailure
from stock_dashboard.domain.models.holding import Holding, normalize_symbol

__all__ = [
    "QuoteFailure",
    "Holding",
    "normalize_symbol",
]
