"""Pydantic schemas for API request/response."""

from stock_dashboard.api.schemas.portfolio import (
    HoldingResultResponse,
    DashboardResponse,
    QuoteResponse,
)

__all__ = [
    "HoldingResultResponse",
    "DashboardResponse",
    "QuoteResponse",
]
