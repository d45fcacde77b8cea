"""JSON file implementation of HoldingRepository."""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from stock_dashboard.domain.models import Holding, normalize_symbol

logger = logging.getLogger(__name__)


class HoldingRecord(BaseModel):
    """One entry of the holdings document."""

    symbol: str
    quantity: Decimal
    purchase_price: Optional[Decimal] = None

    @field_validator("symbol")
    @classmethod
    def check_symbol(cls, value: str) -> str:
        symbol = normalize_symbol(value)
        if not symbol:
            raise ValueError("symbol must not be empty")
        return symbol


_HOLDINGS_ADAPTER = TypeAdapter(list[HoldingRecord])


class JsonPortfolioRepository:
    """
    Reads holdings from a JSON array of {symbol, quantity, purchase_price?}.

    A missing, unreadable or malformed document yields an empty list.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def list_holdings(self) -> list[Holding]:
        """Load holdings in file order."""
        if not self._path.is_file():
            logger.warning("Portfolio file not found: %s", self._path)
            return []

        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            logger.warning("Portfolio file unreadable (%s): %s", self._path, exc)
            return []

        try:
            records = _HOLDINGS_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Portfolio file malformed (%s): %d error(s)", self._path, exc.error_count()
            )
            return []

        return [
            Holding(
                symbol=r.symbol,
                quantity=r.quantity,
                purchase_price=r.purchase_price,
            )
            for r in records
        ]
