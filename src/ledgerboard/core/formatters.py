"""Display formatting helpers (en-US conventions)."""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int, float]

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
}

_CENTS = Decimal("0.01")


def format_currency(amount: Number, currency: str = "USD", include_symbol: bool = True) -> str:
    """
    Format an amount as currency with two fraction digits.

    Examples:
        format_currency(Decimal("1234.5")) -> "$1,234.50"
        format_currency(Decimal("-20")) -> "-$20.00"
        format_currency(Decimal("20"), "KES") -> "KES 20.00"
        format_currency(Decimal("20"), include_symbol=False) -> "20.00"
    """
    value = Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    if not include_symbol:
        return f"{sign}{digits}"
    symbol = _CURRENCY_SYMBOLS.get(currency.upper())
    if symbol is None:
        return f"{sign}{currency.upper()} {digits}"
    return f"{sign}{symbol}{digits}"


def format_date(dt: datetime) -> str:
    """Format a date like ``Jan 5, 2024``."""
    return f"{dt:%b} {dt.day}, {dt.year}"


def format_date_range(start: datetime, end: datetime) -> str:
    """Format a range like ``Jan 5 - Feb 3, 2024``."""
    return f"{start:%b} {start.day} - {format_date(end)}"


def format_month_label(dt: datetime) -> str:
    """Format a month like ``Jan 2024``."""
    return f"{dt:%b} {dt.year}"


def format_percentage(value: Number, decimals: int = 1) -> str:
    """Format a percentage value like ``12.5%``."""
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded}%"


def format_number(value: Number) -> str:
    """Format a number with thousands separators."""
    return f"{value:,}"
