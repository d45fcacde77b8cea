"""File-backed repository implementations."""

from stock_dashboard.repositories.filesystem.portfolio_repo import (
    JsonPortfolioRepository,
    HoldingRecord,
)

__all__ = [
    "JsonPortfolioRepository",
    "HoldingRecord",
]
