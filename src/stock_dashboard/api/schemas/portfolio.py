"""Pydantic schemas for dashboard and quote endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class HoldingResultResponse(BaseModel):
    """A single holding valued at its current quote."""

    symbol: str
    quantity: Decimal
    purchase_price: Optional[Decimal] = None
    # Quote fields (price is null when the quote failed; error says why)
    price: Optional[Decimal] = None
    change_percent: str
    volume: str
    pe_ratio: str
    error: Optional[str] = None
    total_value: Decimal
    profitability: Optional[Decimal] = None


class DashboardResponse(BaseModel):
    """Portfolio summary plus the time it was rendered."""

    stocks: list[HoldingResultResponse]
    grand_total: Decimal
    now: datetime


class QuoteResponse(BaseModel):
    """Response schema for a market quote."""

    symbol: str
    price: Optional[Decimal] = None
    change_percent: str
    volume: str
    error: Optional[str] = None
    as_of: Optional[datetime] = None
