"""Core utilities and shared functionality."""

from ledgerboard.core.timezone import (
    now_local,
    to_local,
    parse_datetime_local,
    get_timezone,
)
from ledgerboard.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ContextNotInitializedError,
)

__all__ = [
    "now_local",
    "to_local",
    "parse_datetime_local",
    "get_timezone",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ContextNotInitializedError",
]
