"""
Pytest configuration and fixtures for the stock dashboard tests.

This module provides:
- Deterministic and failing quote providers
- Fake clock, recording sleep and recording failure sink
- In-memory SQLite database fixtures
- Portfolio file helpers
- Service fixtures and a FastAPI test client with overrides
"""

import json
import threading
from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session

from stock_dashboard.api import deps
from stock_dashboard.config.settings import Settings, reset_settings, set_settings
from stock_dashboard.core.timezone import EASTERN_TZ
from stock_dashboard.domain.models import QuoteFailure
from stock_dashboard.domain.views import Quote
from stock_dashboard.main import app
from stock_dashboard.repositories.filesystem import JsonPortfolioRepository
from stock_dashboard.repositories.memory import InMemoryQuoteCache
from stock_dashboard.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from stock_dashboard.repositories.sqlalchemy import orm_models  # noqa: F401
from stock_dashboard.repositories.sqlalchemy import SqlAlchemyQuoteCache
from stock_dashboard.services import PortfolioService, QuoteFetcher


# =============================================================================
# TIME HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Manually advanced clock; callable like time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUtcClock:
    """Manually advanced naive-UTC datetime clock."""

    def __init__(self, start: datetime = datetime(2024, 6, 15, 18, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class RecordingSleep:
    """Stands in for time.sleep; records requested delays."""

    def __init__(self, events: Optional[list] = None):
        self.calls: list[float] = []
        self._events = events

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self._events is not None:
            self._events.append(("sleep", seconds))


class RecordingSink:
    """Failure sink that keeps every report."""

    def __init__(self):
        self.reports: list[tuple[str, str]] = []

    def report(self, symbol: str, message: str) -> None:
        self.reports.append((symbol, message))

    @property
    def symbols(self) -> list[str]:
        return [s for s, _ in self.reports]


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Known symbols get fixed prices; unknown symbols get a NO_DATA failure.
    Every call is recorded (thread-safe) so tests can count requests.
    """

    FIXED_PRICES = {
        "IBM": Decimal("200.00"),
        "AAPL": Decimal("185.50"),
        "MSFT": Decimal("378.25"),
        "GOOGL": Decimal("142.75"),
        "TSLA": Decimal("248.75"),
        "AMZN": Decimal("178.50"),
        "NVDA": Decimal("485.25"),
        "META": Decimal("505.50"),
    }

    def __init__(self, events: Optional[list] = None):
        self.calls: list[str] = []
        self._events = events
        self._lock = threading.Lock()

    def fetch_quote(self, symbol: str) -> Quote:
        with self._lock:
            self.calls.append(symbol)
            if self._events is not None:
                self._events.append(("fetch", symbol))
        price = self.FIXED_PRICES.get(symbol)
        if price is None:
            return Quote.failed(symbol, QuoteFailure.NO_DATA, f"No data found for symbol: {symbol}")
        return Quote(
            symbol=symbol,
            price=price,
            change_percent="1.5000%",
            volume="1000000",
            as_of=eastern_datetime(2024, 6, 15, 16, 0, 0),
        )

    def call_count(self, symbol: Optional[str] = None) -> int:
        if symbol is None:
            return len(self.calls)
        return self.calls.count(symbol)


class RateLimitedMarketProvider:
    """Provider that always answers with the rate-limit notice."""

    def __init__(self):
        self.calls: list[str] = []

    def fetch_quote(self, symbol: str) -> Quote:
        self.calls.append(symbol)
        return Quote.failed(
            symbol,
            QuoteFailure.RATE_LIMITED,
            "Alpha Vantage API limit reached: Thank you for using Alpha Vantage!",
        )


class ExplodingMarketProvider:
    """Provider that raises instead of returning a failed Quote."""

    def fetch_quote(self, symbol: str) -> Quote:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def deterministic_provider() -> DeterministicMarketProvider:
    """Provide deterministic market data provider."""
    return DeterministicMarketProvider()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# PORTFOLIO FILE FIXTURES
# =============================================================================


@pytest.fixture
def write_portfolio(tmp_path: Path) -> Callable[[object], Path]:
    """Write a holdings document (any JSON value, or raw text) and return its path."""

    def _write(content, name: str = "portfolio.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def quote_cache(fake_clock) -> InMemoryQuoteCache:
    """Provide in-memory QuoteCache driven by the fake clock."""
    return InMemoryQuoteCache(clock=fake_clock)


@pytest.fixture
def quote_fetcher(deterministic_provider, recording_sink, recording_sleep) -> QuoteFetcher:
    """Provide QuoteFetcher that never actually sleeps."""
    return QuoteFetcher(
        provider=deterministic_provider,
        failure_sink=recording_sink,
        batch_size=5,
        batch_delay_seconds=2.0,
        sleep=recording_sleep,
    )


@pytest.fixture
def portfolio_service_factory(
    quote_cache,
    quote_fetcher,
) -> Callable[[Path], PortfolioService]:
    """Build a PortfolioService reading the given holdings file."""

    def _create(path: Path) -> PortfolioService:
        return PortfolioService(
            holding_repo=JsonPortfolioRepository(path),
            quote_cache=quote_cache,
            quote_fetcher=quote_fetcher,
            cache_ttl_seconds=300,
        )

    return _create


@pytest.fixture
def portfolio_service(portfolio_service_factory, tmp_path) -> PortfolioService:
    """PortfolioService whose holdings file does not exist."""
    return portfolio_service_factory(tmp_path / "missing.json")


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


AUTH = ("admin", "admin123")


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Settings pointing at a temp data dir with default credentials."""
    settings = Settings(
        data_dir=tmp_path,
        portfolio_path=tmp_path / "portfolio.json",
        quote_provider="stub",
        quote_cache_backend="memory",
        dashboard_username="admin",
        dashboard_password="admin123",
    )
    set_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture
def client(api_settings, deterministic_provider, recording_sink, quote_cache) -> TestClient:
    """Provide FastAPI test client with deterministic quotes and no sleeping."""

    def override_quote_fetcher() -> QuoteFetcher:
        return QuoteFetcher(
            provider=deterministic_provider,
            failure_sink=recording_sink,
            sleep=RecordingSleep(),
        )

    def override_quote_cache():
        yield quote_cache

    app.dependency_overrides[deps.get_quote_fetcher] = override_quote_fetcher
    app.dependency_overrides[deps.get_quote_cache] = override_quote_cache
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    deps.reset_dependencies()


@pytest.fixture
def sqlite_quote_cache(test_session, fake_utc_clock) -> SqlAlchemyQuoteCache:
    """Provide SQLAlchemy QuoteCache on in-memory SQLite."""
    return SqlAlchemyQuoteCache(test_session, clock=fake_utc_clock)


@pytest.fixture
def fake_utc_clock() -> FakeUtcClock:
    return FakeUtcClock()
