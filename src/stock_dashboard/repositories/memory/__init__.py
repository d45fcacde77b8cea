"""In-process repository implementations."""

from stock_dashboard.repositories.memory.quote_cache import InMemoryQuoteCache

__all__ = ["InMemoryQuoteCache"]
