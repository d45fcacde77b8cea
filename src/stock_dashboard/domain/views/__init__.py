"""View models for service outputs."""

from stock_dashboard.domain.views.portfolio import (
    NOT_AVAILABLE,
    DATA_NOT_FOUND,
    Quote,
    HoldingResult,
    PortfolioSummary,
)

__all__ = [
    "NOT_AVAILABLE",
    "DATA_NOT_FOUND",
    "Quote",
    "HoldingResult",
    "PortfolioSummary",
]
