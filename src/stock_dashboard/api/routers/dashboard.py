"""Dashboard endpoint: portfolio summary for the configured holdings file."""

from fastapi import APIRouter, Depends

from stock_dashboard.api.deps import get_portfolio_service
from stock_dashboard.api.schemas import DashboardResponse, HoldingResultResponse
from stock_dashboard.api.security import require_user
from stock_dashboard.core.timezone import now_eastern
from stock_dashboard.services import PortfolioService

router = APIRouter(tags=["dashboard"], dependencies=[Depends(require_user)])


@router.get("/", response_model=DashboardResponse)
def get_dashboard(
    portfolio: PortfolioService = Depends(get_portfolio_service),
) -> DashboardResponse:
    """
    Value every holding at its current quote.

    Always 200: missing holdings file gives an empty list, failed quotes
    show up per stock with price null and an error message.
    """
    summary = portfolio.get_portfolio_summary()

    return DashboardResponse(
        stocks=[
            HoldingResultResponse(
                symbol=s.symbol,
                quantity=s.quantity,
                purchase_price=s.purchase_price,
                price=s.price,
                change_percent=s.change_percent,
                volume=s.volume,
                pe_ratio=s.pe_ratio,
                error=s.error,
                total_value=s.total_value,
                profitability=s.profitability,
            )
            for s in summary.stocks
        ],
        grand_total=summary.grand_total,
        now=now_eastern(),
    )
