"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, String, DateTime, Numeric

from stock_dashboard.repositories.sqlalchemy.database import Base


class QuoteCacheORM(Base):
    """SQLAlchemy model for a cached quote (one row per symbol)."""

    __tablename__ = "quote_cache"

    symbol = Column(String(20), primary_key=True)
    price = Column(Numeric(precision=18, scale=4), nullable=True)
    change_percent = Column(String(32), nullable=False, default="N/A")
    volume = Column(String(32), nullable=False, default="N/A")
    error = Column(String(512), nullable=True)
    failure = Column(String(32), nullable=True)
    fetched_at_utc = Column(DateTime, nullable=True)
    expires_at_utc = Column(DateTime, nullable=False)
