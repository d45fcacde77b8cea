"""
Unit tests for InMemoryQuoteCache.

Tests cover:
- get/put/delete
- TTL expiry (absent and expired look the same)
- Overwrite semantics
"""

from decimal import Decimal

from stock_dashboard.domain.models import QuoteFailure
from stock_dashboard.domain.views import Quote
from stock_dashboard.repositories.memory import InMemoryQuoteCache


def ibm_quote(price: str = "200.00") -> Quote:
    return Quote(symbol="IBM", price=Decimal(price), change_percent="1.5%", volume="1000")


class TestInMemoryQuoteCache:
    """Tests for the in-memory cache backend."""

    def test_get_absent_returns_none(self, quote_cache: InMemoryQuoteCache):
        assert quote_cache.get("IBM") is None

    def test_put_then_get(self, quote_cache: InMemoryQuoteCache):
        quote_cache.put("IBM", ibm_quote(), 300)

        assert quote_cache.get("IBM") == ibm_quote()

    def test_keys_are_case_insensitive(self, quote_cache: InMemoryQuoteCache):
        quote_cache.put("ibm", ibm_quote(), 300)

        assert quote_cache.get("IBM") == ibm_quote()

    def test_entry_expires_after_ttl(self, quote_cache: InMemoryQuoteCache, fake_clock):
        """
        GIVEN an entry stored with a 300s TTL
        WHEN 299s pass it is still there
        AND at 300s it is gone and evicted
        """
        quote_cache.put("IBM", ibm_quote(), 300)

        fake_clock.advance(299)
        assert quote_cache.get("IBM") is not None

        fake_clock.advance(1)
        assert quote_cache.get("IBM") is None
        assert len(quote_cache) == 0

    def test_put_overwrites_existing_entry(self, quote_cache: InMemoryQuoteCache, fake_clock):
        """
        GIVEN a failure marker cached for IBM
        WHEN a fresh quote is put
        THEN the fresh quote replaces it with a fresh TTL
        """
        quote_cache.put("IBM", Quote.failed("IBM", QuoteFailure.NO_DATA, "stale"), 10)

        fake_clock.advance(5)
        quote_cache.put("IBM", ibm_quote("201.00"), 300)
        fake_clock.advance(100)

        assert quote_cache.get("IBM").price == Decimal("201.00")

    def test_get_does_not_store_anything(self, quote_cache: InMemoryQuoteCache):
        quote_cache.get("IBM")

        assert len(quote_cache) == 0

    def test_delete(self, quote_cache: InMemoryQuoteCache):
        quote_cache.put("IBM", ibm_quote(), 300)

        quote_cache.delete("IBM")
        quote_cache.delete("NOT-THERE")

        assert quote_cache.get("IBM") is None

    def test_clear(self, quote_cache: InMemoryQuoteCache):
        quote_cache.put("IBM", ibm_quote(), 300)
        quote_cache.put("AAPL", ibm_quote(), 300)

        quote_cache.clear()

        assert len(quote_cache) == 0
