"""SQLAlchemy implementation of QuoteCache."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Optional

from sqlalchemy.orm import Session

from stock_dashboard.core.timezone import to_eastern
from stock_dashboard.domain.models import QuoteFailure
from stock_dashboard.domain.views import Quote
from stock_dashboard.repositories.protocols.quote_cache import DEFAULT_QUOTE_TTL_SECONDS
from stock_dashboard.repositories.sqlalchemy.orm_models import QuoteCacheORM


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in SQLite DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SqlAlchemyQuoteCache:
    """SQLite-backed quote cache; survives process restarts until expiry."""

    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow):
        self._db = db
        self._clock = clock

    def get(self, symbol: str) -> Optional[Quote]:
        """Return the cached quote, or None if absent or expired."""
        key = symbol.upper()
        orm_quote = self._db.get(QuoteCacheORM, key)
        if orm_quote is None:
            return None
        if self._clock() >= orm_quote.expires_at_utc:
            self._db.delete(orm_quote)
            self._db.commit()
            return None
        return self._to_domain(orm_quote)

    def put(self, symbol: str, quote: Quote, ttl_seconds: int = DEFAULT_QUOTE_TTL_SECONDS) -> None:
        """Insert or replace the cached quote for the symbol."""
        key = symbol.upper()
        now = self._clock()
        orm_quote = self._db.get(QuoteCacheORM, key)
        if orm_quote is None:
            orm_quote = QuoteCacheORM(symbol=key)
            self._db.add(orm_quote)

        orm_quote.price = quote.price
        orm_quote.change_percent = quote.change_percent
        orm_quote.volume = quote.volume
        orm_quote.error = quote.error
        orm_quote.failure = quote.failure.value if quote.failure else None
        orm_quote.fetched_at_utc = now
        orm_quote.expires_at_utc = now + timedelta(seconds=ttl_seconds)
        self._db.commit()

    def delete(self, symbol: str) -> None:
        """Remove the cached quote for the symbol."""
        self._db.query(QuoteCacheORM).filter(
            QuoteCacheORM.symbol == symbol.upper()
        ).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: QuoteCacheORM) -> Quote:
        """Convert ORM row to domain Quote."""
        return Quote(
            symbol=orm.symbol,
            price=Decimal(str(orm.price)) if orm.price is not None else None,
            change_percent=orm.change_percent,
            volume=orm.volume,
            error=orm.error,
            failure=QuoteFailure(orm.failure) if orm.failure else None,
            as_of=to_eastern(orm.fetched_at_utc) if orm.fetched_at_utc else None,
        )
