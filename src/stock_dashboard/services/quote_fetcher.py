"""Batched, rate-limited quote fetching."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Iterator, Optional

from stock_dashboard.domain.models import QuoteFailure, normalize_symbol
from stock_dashboard.domain.views import Quote
from stock_dashboard.providers.market_data_provider import MarketDataProvider
from stock_dashboard.services.failure_sink import LoggingFailureSink, QuoteFailureSink

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 5
DEFAULT_BATCH_DELAY_SECONDS = 2.0


def _chunks(seq: list[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(seq), size):
        yield seq[start:start + size]


class QuoteFetcher:
    """
    Fetches quotes for many symbols without tripping the provider rate limit.

    Symbols are deduplicated and split into batches of ``batch_size``. Requests
    within a batch run concurrently; the next batch starts only after every
    response of the current one is in and ``batch_delay_seconds`` has passed.
    Failures come back as failed Quotes and are reported to ``failure_sink``
    once per symbol; nothing is raised to the caller.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        failure_sink: Optional[QuoteFailureSink] = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        batch_delay_seconds: float = DEFAULT_BATCH_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self._provider = provider
        self._sink = failure_sink or LoggingFailureSink()
        self._batch_size = batch_size
        self._batch_delay = batch_delay_seconds
        self._sleep = sleep

    def fetch_quotes(self, symbols: Iterable[str]) -> dict[str, Quote]:
        """
        Fetch one quote per distinct symbol.

        Returns dict mapping symbol -> Quote (successful or failed); every
        requested symbol is present exactly once.
        """
        unique = list(dict.fromkeys(s for s in map(normalize_symbol, symbols) if s))
        if not unique:
            return {}

        result: dict[str, Quote] = {}
        for index, batch in enumerate(_chunks(unique, self._batch_size)):
            if index > 0:
                logger.debug("Waiting %.1fs before quote batch %d", self._batch_delay, index + 1)
                self._sleep(self._batch_delay)

            with ThreadPoolExecutor(max_workers=len(batch)) as ex:
                quotes = list(ex.map(self._fetch_one, batch))

            for symbol, quote in zip(batch, quotes):
                if not quote.ok:
                    self._sink.report(symbol, quote.error)
                result[symbol] = quote

        return result

    def _fetch_one(self, symbol: str) -> Quote:
        try:
            quote = self._provider.fetch_quote(symbol)
        except Exception as exc:
            # Provider bugs or library errors must not abort the batch
            return Quote.failed(symbol, QuoteFailure.TRANSPORT, str(exc) or type(exc).__name__)

        # price is None exactly when error is set
        if quote.error is None and quote.price is None:
            return Quote.failed(
                symbol,
                QuoteFailure.INVALID_PRICE,
                f"No price returned for symbol: {symbol}",
                as_of=quote.as_of,
            )
        return quote
