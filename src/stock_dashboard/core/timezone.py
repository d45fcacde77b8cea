"""Timezone utilities for US/Eastern market time."""

from datetime import datetime

import pytz

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern timezone."""
    if dt.tzinfo is None:
        # Assume naive datetime is UTC (as stored by the SQLite cache)
        return pytz.utc.localize(dt).astimezone(EASTERN_TZ)
    return dt.astimezone(EASTERN_TZ)
