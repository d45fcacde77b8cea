"""View models for quotes and portfolio summary outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from stock_dashboard.domain.models.enums import QuoteFailure

NOT_AVAILABLE = "N/A"
DATA_NOT_FOUND = "Data not found"


@dataclass(frozen=True)
class Quote:
    """
    Market quote data for a symbol, or a failure marker.

    Exactly one of ``price`` and ``error`` is set: a successful quote has a
    price and no error, a failed one carries ``failure``/``error`` and no price.
    """

    symbol: str
    price: Optional[Decimal] = None
    change_percent: str = NOT_AVAILABLE
    volume: str = NOT_AVAILABLE
    pe_ratio: str = NOT_AVAILABLE  # GLOBAL_QUOTE does not provide P/E
    error: Optional[str] = None
    failure: Optional[QuoteFailure] = None
    as_of: Optional[datetime] = None

    @property
    def ok(self) -> bool:
        """True when the quote carries a price and no error."""
        return self.error is None and self.price is not None

    @classmethod
    def failed(
        cls,
        symbol: str,
        failure: QuoteFailure,
        message: str,
        as_of: Optional[datetime] = None,
    ) -> "Quote":
        """Build a failure quote with placeholder fields."""
        return cls(symbol=symbol, failure=failure, error=message, as_of=as_of)

    @classmethod
    def not_found(cls, symbol: str) -> "Quote":
        """Failure quote for a symbol that resolved to nothing."""
        return cls.failed(symbol, QuoteFailure.NOT_FOUND, DATA_NOT_FOUND)


@dataclass
class HoldingResult:
    """Valuation of a single holding joined with its quote."""

    symbol: str
    quantity: Decimal
    purchase_price: Optional[Decimal]
    price: Optional[Decimal]
    change_percent: str
    volume: str
    pe_ratio: str
    error: Optional[str]
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    profitability: Optional[Decimal] = None
    as_of: Optional[datetime] = None


@dataclass
class PortfolioSummary:
    """Per-holding results (input order) and their grand total."""

    stocks: list[HoldingResult] = field(default_factory=list)
    grand_total: Decimal = field(default_factory=lambda: Decimal("0"))
