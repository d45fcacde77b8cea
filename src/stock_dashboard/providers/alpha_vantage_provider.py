"""Alpha Vantage GLOBAL_QUOTE provider."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import httpx

from stock_dashboard.core.timezone import now_eastern
from stock_dashboard.domain.models import QuoteFailure
from stock_dashboard.domain.views import NOT_AVAILABLE, Quote

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Keys the provider uses for its own throttling notices
_RATE_LIMIT_KEYS = ("Note", "Information")


def parse_global_quote(symbol: str, payload: Any) -> Quote:
    """
    Turn a GLOBAL_QUOTE response body into a Quote.

    Returns a failed Quote for rate-limit notices, missing or empty
    "Global Quote" objects and prices that are missing or not numeric.
    """
    if not isinstance(payload, dict):
        return Quote.failed(symbol, QuoteFailure.NO_DATA, f"No data found for symbol: {symbol}")

    for key in _RATE_LIMIT_KEYS:
        if key in payload:
            return Quote.failed(
                symbol,
                QuoteFailure.RATE_LIMITED,
                f"Alpha Vantage API limit reached: {payload[key]}",
            )

    quote = payload.get("Global Quote")
    if not isinstance(quote, dict) or not quote:
        return Quote.failed(symbol, QuoteFailure.NO_DATA, f"No data found for symbol: {symbol}")

    raw_price = quote.get("05. price")
    try:
        price = Decimal(str(raw_price).strip())
    except (InvalidOperation, ValueError):
        price = None
    if price is None or not price.is_finite():
        return Quote.failed(
            symbol,
            QuoteFailure.INVALID_PRICE,
            f"Invalid price for symbol {symbol}: {raw_price!r}",
        )

    return Quote(
        symbol=symbol,
        price=price,
        change_percent=quote.get("10. change percent") or NOT_AVAILABLE,
        volume=quote.get("06. volume") or NOT_AVAILABLE,
        as_of=now_eastern(),
    )


class AlphaVantageProvider:
    """
    Fetches single-symbol quotes from the Alpha Vantage query endpoint.

    Each call is one HTTP GET bounded by the client timeout. The underlying
    httpx.Client is thread-safe, so one provider can serve a whole batch.
    """

    def __init__(
        self,
        api_key: str = "demo",
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_seconds)

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch GLOBAL_QUOTE for one symbol."""
        params = {
            "function": "GLOBAL_QUOTE",
            "symbol": symbol,
            "apikey": self._api_key,
        }
        try:
            response = self._client.get(self._base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            return Quote.failed(symbol, QuoteFailure.TRANSPORT, f"Request failed: {exc}")
        except ValueError as exc:
            # Body was not JSON
            return Quote.failed(symbol, QuoteFailure.NO_DATA, f"Malformed response: {exc}")

        logger.debug("Fetched GLOBAL_QUOTE for %s", symbol)
        return parse_global_quote(symbol, payload)

    def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            self._client.close()
