"""API routers package."""

from stock_dashboard.api.routers.dashboard import router as dashboard_router
from stock_dashboard.api.routers.quotes import router as quotes_router

__all__ = [
    "dashboard_router",
    "quotes_router",
]
