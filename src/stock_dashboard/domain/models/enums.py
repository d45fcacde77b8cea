"""Domain enumerations."""

from enum import Enum


class QuoteFailure(str, Enum):
    """Reason a quote could not be produced for a symbol."""

    TRANSPORT = "TRANSPORT"  # network error, timeout or HTTP error status
    RATE_LIMITED = "RATE_LIMITED"  # provider returned a rate-limit notice
    NO_DATA = "NO_DATA"  # missing or empty "Global Quote" payload
    INVALID_PRICE = "INVALID_PRICE"  # price missing or not numeric
    NOT_FOUND = "NOT_FOUND"  # no quote resolved for the symbol at all
