"""In-memory implementation of QuoteCache."""

import threading
import time
from typing import Callable, Optional

from stock_dashboard.domain.views import Quote
from stock_dashboard.repositories.protocols.quote_cache import DEFAULT_QUOTE_TTL_SECONDS


class InMemoryQuoteCache:
    """
    Dict-backed quote cache with per-entry expiry.

    Lives for the lifetime of the process; entries are (expires_at, quote)
    pairs measured on a monotonic clock.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._store: dict[str, tuple[float, Quote]] = {}
        self._lock = threading.Lock()

    def get(self, symbol: str) -> Optional[Quote]:
        """Return the cached quote, or None if absent or expired."""
        key = symbol.upper()
        with self._lock:
            item = self._store.get(key)
            if item is None:
                return None
            expires_at, quote = item
            if self._clock() >= expires_at:
                self._store.pop(key, None)
                return None
            return quote

    def put(self, symbol: str, quote: Quote, ttl_seconds: int = DEFAULT_QUOTE_TTL_SECONDS) -> None:
        """Store a quote, replacing any existing entry."""
        with self._lock:
            self._store[symbol.upper()] = (self._clock() + ttl_seconds, quote)

    def delete(self, symbol: str) -> None:
        """Remove the cached quote for the symbol."""
        with self._lock:
            self._store.pop(symbol.upper(), None)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
