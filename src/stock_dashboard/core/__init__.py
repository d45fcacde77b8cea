"""Core utilities and shared functionality."""

from stock_dashboard.core.timezone import (
    now_eastern,
    to_eastern,
    EASTERN_TZ,
)
from stock_dashboard.core.exceptions import (
    AppError,
    ValidationError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
]
