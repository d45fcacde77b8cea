"""Service layer - business logic orchestration."""

from stock_dashboard.services.failure_sink import QuoteFailureSink, LoggingFailureSink
from stock_dashboard.services.quote_fetcher import QuoteFetcher
from stock_dashboard.services.portfolio_service import PortfolioService

__all__ = [
    "QuoteFailureSink",
    "LoggingFailureSink",
    "QuoteFetcher",
    "PortfolioService",
]
