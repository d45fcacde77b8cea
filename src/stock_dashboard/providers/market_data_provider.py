"""Market data provider protocol."""

from typing import Protocol

from stock_dashboard.domain.views import Quote


class MarketDataProvider(Protocol):
    """
    Protocol for market data providers.

    Implementations issue one upstream request per call and report expected
    failures (transport errors, rate limiting, empty payloads) as a failed
    Quote instead of raising.
    """

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch the current quote for a single symbol."""
        ...
