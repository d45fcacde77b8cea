"""Stub market data provider for offline/testing use."""

import random
import threading
from decimal import Decimal

from stock_dashboard.core.timezone import now_eastern
from stock_dashboard.domain.views import Quote


# Deterministic fake quotes for common symbols: (price, change percent, volume)
_STUB_QUOTES: dict[str, tuple[Decimal, str, str]] = {
    "AAPL": (Decimal("185.50"), "0.6784%", "52164500"),
    "GOOGL": (Decimal("142.75"), "0.8834%", "24310200"),
    "MSFT": (Decimal("378.25"), "0.3848%", "19876300"),
    "AMZN": (Decimal("178.50"), "0.7052%", "38211900"),
    "TSLA": (Decimal("248.75"), "-0.5398%", "97451200"),
    "NVDA": (Decimal("485.25"), "0.5699%", "41230800"),
    "META": (Decimal("505.50"), "0.5470%", "14988100"),
    "IBM": (Decimal("200.00"), "1.5000%", "1000000"),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Uses predefined quotes for common symbols; generates seeded random prices
    for unknown symbols.
    """

    def __init__(self, seed: int = 42):
        """Initialize with optional random seed for reproducibility."""
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def fetch_quote(self, symbol: str) -> Quote:
        """Return a stub quote for the symbol."""
        upper_symbol = symbol.upper()
        if upper_symbol in _STUB_QUOTES:
            price, change_percent, volume = _STUB_QUOTES[upper_symbol]
        else:
            # Called from fetcher worker threads
            with self._lock:
                base = self._rng.random()
                change = (self._rng.random() - 0.5) * 4
                volume_int = self._rng.randint(10_000, 5_000_000)
            price = Decimal(str(50 + base * 200)).quantize(Decimal("0.01"))
            change_percent = f"{change:.4f}%"
            volume = str(volume_int)

        return Quote(
            symbol=upper_symbol,
            price=price,
            change_percent=change_percent,
            volume=volume,
            as_of=now_eastern(),
        )
