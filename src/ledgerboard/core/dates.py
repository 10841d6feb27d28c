"""Calendar helpers for budget windows, report buckets and sample points.

All helpers do wall-clock arithmetic on the naive part of a datetime and then
re-attach the original zone, so stepping across a DST change keeps midnight
at midnight.
"""

from datetime import datetime, time, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta


def _localize_like(naive: datetime, reference: datetime) -> datetime:
    tz = reference.tzinfo
    if tz is None:
        return naive
    if hasattr(tz, "localize"):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def _naive(dt: datetime) -> datetime:
    return dt.replace(tzinfo=None)


def start_of_day(dt: datetime) -> datetime:
    return _localize_like(datetime.combine(dt.date(), time.min), dt)


def end_of_day(dt: datetime) -> datetime:
    return _localize_like(datetime.combine(dt.date(), time.max), dt)


def add_days(dt: datetime, days: int) -> datetime:
    return _localize_like(_naive(dt) + timedelta(days=days), dt)


def start_of_week(dt: datetime) -> datetime:
    """Sunday 00:00 of the week containing ``dt``."""
    days_since_sunday = (dt.weekday() + 1) % 7
    return start_of_day(add_days(dt, -days_since_sunday))


def end_of_week(dt: datetime) -> datetime:
    """Saturday 23:59:59.999999 of the week containing ``dt``."""
    return end_of_day(add_days(start_of_week(dt), 6))


def start_of_month(dt: datetime) -> datetime:
    return _localize_like(datetime(dt.year, dt.month, 1), dt)


def end_of_month(dt: datetime) -> datetime:
    last_day = datetime(dt.year, dt.month, 1) + relativedelta(months=1, days=-1)
    return _localize_like(datetime.combine(last_day.date(), time.max), dt)


def start_of_year(dt: datetime) -> datetime:
    return _localize_like(datetime(dt.year, 1, 1), dt)


def end_of_year(dt: datetime) -> datetime:
    return _localize_like(datetime.combine(datetime(dt.year, 12, 31).date(), time.max), dt)


def shift_months(dt: datetime, months: int) -> datetime:
    """Shift by whole calendar months, clamping the day to the month length."""
    return _localize_like(_naive(dt) + relativedelta(months=months), dt)


def month_key(dt: datetime) -> str:
    """Sortable ``YYYY-MM`` key for the month containing ``dt``."""
    return f"{dt.year:04d}-{dt.month:02d}"


def iter_month_starts(start: datetime, end: datetime) -> Iterator[datetime]:
    """Yield the first instant of every calendar month from ``start``'s month through ``end``'s."""
    current = datetime(start.year, start.month, 1)
    last = datetime(end.year, end.month, 1)
    while current <= last:
        yield _localize_like(current, start)
        current += relativedelta(months=1)
