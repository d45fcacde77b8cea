"""Quote cache protocol."""

from typing import Protocol, Optional

from stock_dashboard.domain.views import Quote

DEFAULT_QUOTE_TTL_SECONDS = 300


class QuoteCache(Protocol):
    """
    Per-symbol quote store with expiry.

    ``get`` treats absent and expired entries the same way and never stores
    anything itself; ``put`` always replaces the existing entry.
    """

    def get(self, symbol: str) -> Optional[Quote]:
        """Return the cached quote, or None if absent or expired."""
        ...

    def put(self, symbol: str, quote: Quote, ttl_seconds: int = DEFAULT_QUOTE_TTL_SECONDS) -> None:
        """Store a quote for the symbol, overwriting any existing entry."""
        ...

    def delete(self, symbol: str) -> None:
        """Remove the cached quote for the symbol, if any."""
        ...
