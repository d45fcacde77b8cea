"""Market data providers module."""

from stock_dashboard.providers.market_data_provider import MarketDataProvider
from stock_dashboard.providers.alpha_vantage_provider import (
    AlphaVantageProvider,
    parse_global_quote,
)
from stock_dashboard.providers.stub_provider import StubMarketDataProvider

__all__ = [
    "MarketDataProvider",
    "AlphaVantageProvider",
    "parse_global_quote",
    "StubMarketDataProvider",
]
