"""Domain layer - pure business models with no external dependencies."""

from stock_dashboard.domain.models import Holding, QuoteFailure
from stock_dashboard.domain.views import Quote, HoldingResult, PortfolioSummary

__all__ = [
    "Holding",
    "QuoteFailure",
    "Quote",
    "HoldingResult",
    "PortfolioSummary",
]
