"""Quote lookup endpoint."""

from fastapi import APIRouter, Depends, Query

from stock_dashboard.api.deps import get_portfolio_service
from stock_dashboard.api.schemas import QuoteResponse
from stock_dashboard.api.security import require_user
from stock_dashboard.core.exceptions import ValidationError
from stock_dashboard.domain.models import normalize_symbol
from stock_dashboard.services import PortfolioService

router = APIRouter(prefix="/quotes", tags=["quotes"], dependencies=[Depends(require_user)])


@router.get("", response_model=list[QuoteResponse])
def get_quotes(
    symbols: str = Query(..., description="Comma-separated symbols"),
    portfolio: PortfolioService = Depends(get_portfolio_service),
) -> list[QuoteResponse]:
    """Get market quotes for symbols (served from cache when fresh)."""
    symbol_list = [s for s in map(normalize_symbol, symbols.split(",")) if s]
    if not symbol_list:
        raise ValidationError("At least one symbol is required")

    quotes = portfolio.get_quotes(symbol_list)

    return [
        QuoteResponse(
            symbol=q.symbol,
            price=q.price,
            change_percent=q.change_percent,
            volume=q.volume,
            error=q.error,
            as_of=q.as_of,
        )
        for q in quotes.values()
    ]
