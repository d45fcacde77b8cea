"""Dependency injection for FastAPI."""

from contextlib import contextmanager
from typing import Generator, Optional

from fastapi import Depends

from stock_dashboard.config.settings import get_settings
from stock_dashboard.providers import (
    AlphaVantageProvider,
    MarketDataProvider,
    StubMarketDataProvider,
)
from stock_dashboard.repositories.filesystem import JsonPortfolioRepository
from stock_dashboard.repositories.memory import InMemoryQuoteCache
from stock_dashboard.repositories.protocols import HoldingRepository, QuoteCache
from stock_dashboard.repositories.sqlalchemy import SqlAlchemyQuoteCache, get_db, reset_database
from stock_dashboard.services import PortfolioService, QuoteFetcher

# Process-wide instances; the cache must outlive a single request
_provider: Optional[MarketDataProvider] = None
_memory_cache: Optional[InMemoryQuoteCache] = None


def get_market_provider() -> MarketDataProvider:
    """Provide the configured MarketDataProvider instance."""
    global _provider
    if _provider is None:
        settings = get_settings()
        if settings.quote_provider == "stub":
            _provider = StubMarketDataProvider()
        else:
            _provider = AlphaVantageProvider(
                api_key=settings.alpha_vantage_key,
                base_url=settings.alpha_vantage_url,
                timeout_seconds=settings.request_timeout_seconds,
            )
    return _provider


def get_quote_cache() -> Generator[QuoteCache, None, None]:
    """Provide the configured QuoteCache backend."""
    global _memory_cache
    settings = get_settings()
    if settings.quote_cache_backend == "sqlite":
        with contextmanager(get_db)() as db:
            yield SqlAlchemyQuoteCache(db)
        return

    if _memory_cache is None:
        _memory_cache = InMemoryQuoteCache()
    yield _memory_cache


def get_holding_repo() -> HoldingRepository:
    """Provide the holdings source."""
    return JsonPortfolioRepository(get_settings().get_portfolio_path())


def get_quote_fetcher(
    provider: MarketDataProvider = Depends(get_market_provider),
) -> QuoteFetcher:
    """Provide QuoteFetcher instance."""
    settings = get_settings()
    return QuoteFetcher(
        provider=provider,
        batch_size=settings.quote_batch_size,
        batch_delay_seconds=settings.quote_batch_delay_seconds,
    )


def get_portfolio_service(
    holding_repo: HoldingRepository = Depends(get_holding_repo),
    quote_cache: QuoteCache = Depends(get_quote_cache),
    quote_fetcher: QuoteFetcher = Depends(get_quote_fetcher),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(
        holding_repo=holding_repo,
        quote_cache=quote_cache,
        quote_fetcher=quote_fetcher,
        cache_ttl_seconds=get_settings().quote_cache_ttl_seconds,
    )


def reset_dependencies() -> None:
    """Drop process-wide instances and dispose the SQLite engine."""
    global _provider, _memory_cache
    close = getattr(_provider, "close", None)
    if close is not None:
        close()
    _provider = None
    _memory_cache = None
    reset_database()
