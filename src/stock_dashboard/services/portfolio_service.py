"""Portfolio summary: join holdings with cached or freshly fetched quotes."""

import logging
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from stock_dashboard.domain.models import Holding, normalize_symbol
from stock_dashboard.domain.views import HoldingResult, PortfolioSummary, Quote
from stock_dashboard.repositories.protocols import (
    DEFAULT_QUOTE_TTL_SECONDS,
    HoldingRepository,
    QuoteCache,
)
from stock_dashboard.services.quote_fetcher import QuoteFetcher

logger = logging.getLogger(__name__)


class PortfolioService:
    """
    Computes portfolio valuation and profitability.

    Quotes are served from ``quote_cache`` when present and fresh; cache
    misses go to ``quote_fetcher`` in one batched call, and successful
    results are written back with ``cache_ttl_seconds``.
    """

    def __init__(
        self,
        holding_repo: HoldingRepository,
        quote_cache: QuoteCache,
        quote_fetcher: QuoteFetcher,
        cache_ttl_seconds: int = DEFAULT_QUOTE_TTL_SECONDS,
    ):
        self._holdings = holding_repo
        self._cache = quote_cache
        self._fetcher = quote_fetcher
        self._cache_ttl = cache_ttl_seconds

    def get_portfolio_summary(self) -> PortfolioSummary:
        """Load holdings from the repository and summarize them."""
        return self.summarize(self._holdings.list_holdings())

    def summarize(self, holdings: Sequence[Holding]) -> PortfolioSummary:
        """
        Value each holding at its current quote.

        One HoldingResult per holding, in input order. A holding without a
        price is valued at 0 and has no profitability.
        """
        if not holdings:
            return PortfolioSummary()

        quotes = self.get_quotes(h.symbol for h in holdings)

        stocks: list[HoldingResult] = []
        grand_total = Decimal("0")
        for holding in holdings:
            quote = quotes.get(normalize_symbol(holding.symbol))
            if quote is None:
                quote = Quote.not_found(holding.symbol)
            result = self._value_holding(holding, quote)
            grand_total += result.total_value
            stocks.append(result)

        return PortfolioSummary(stocks=stocks, grand_total=grand_total)

    def get_quotes(self, symbols: Iterable[str]) -> dict[str, Quote]:
        """
        Resolve quotes for symbols through the cache.

        Returns dict mapping normalized symbol -> Quote, in first-seen
        request order. Symbols with no usable cache entry are fetched in one
        call; only successful quotes are written back, replacing whatever was
        stored before. A symbol the fetcher returns nothing for is omitted.
        """
        keys = list(dict.fromkeys(k for k in map(normalize_symbol, symbols) if k))

        hits: dict[str, Quote] = {}
        to_fetch: list[str] = []
        for key in keys:
            cached = self._cache.get(key)
            if cached is not None and cached.ok:
                hits[key] = cached
            else:
                to_fetch.append(key)

        fetched: dict[str, Quote] = {}
        if to_fetch:
            logger.info(
                "Quote cache: %d hit(s), fetching %d symbol(s)", len(hits), len(to_fetch)
            )
            fetched = self._fetcher.fetch_quotes(to_fetch)
            for key in to_fetch:
                quote = fetched.get(key)
                if quote is not None and quote.ok:
                    self._cache.put(key, quote, self._cache_ttl)

        resolved: dict[str, Quote] = {}
        for key in keys:
            quote = hits.get(key) or fetched.get(key)
            if quote is not None:
                resolved[key] = quote
        return resolved

    @staticmethod
    def _value_holding(holding: Holding, quote: Quote) -> HoldingResult:
        total_value = Decimal("0")
        profitability: Optional[Decimal] = None
        if quote.price is not None:
            total_value = quote.price * holding.quantity
            if holding.purchase_price is not None:
                profitability = total_value - holding.purchase_price * holding.quantity

        return HoldingResult(
            symbol=holding.symbol,
            quantity=holding.quantity,
            purchase_price=holding.purchase_price,
            price=quote.price,
            change_percent=quote.change_percent,
            volume=quote.volume,
            pe_ratio=quote.pe_ratio,
            error=quote.error,
            total_value=total_value,
            profitability=profitability,
            as_of=quote.as_of,
        )
