"""Timezone utilities for the configured local time."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

from ledgerboard.config.settings import get_settings


def get_timezone() -> pytz.BaseTzInfo:
    """Return the configured timezone."""
    return pytz.timezone(get_settings().timezone)


def now_local() -> datetime:
    """Return current time in the configured timezone."""
    return datetime.now(get_timezone())


def to_local(dt: datetime, tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """Convert a datetime to the configured timezone."""
    tz = tz or get_timezone()
    if dt.tzinfo is None:
        # Assume naive datetime is already local
        return tz.localize(dt)
    return dt.astimezone(tz)


def parse_datetime_local(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse a datetime string and return it in the configured timezone.

    If no timezone is provided in the string, assumes the configured one.
    """
    tz = default_tz or get_timezone()
    dt = date_parser.parse(value)
    if dt.tzinfo is None:
        dt = tz.localize(dt)
    return to_local(dt, tz)
