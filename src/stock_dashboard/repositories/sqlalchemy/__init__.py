"""SQLAlchemy repository implementations."""

from stock_dashboard.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from stock_dashboard.repositories.sqlalchemy.quote_cache_repo import SqlAlchemyQuoteCache

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyQuoteCache",
]
