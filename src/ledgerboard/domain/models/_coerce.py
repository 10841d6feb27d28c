"""Field coercion shared by the frozen domain models."""

from decimal import Decimal
from typing import Any


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their printed value (0.1 -> "0.1")
    return Decimal(str(value))


def set_field(obj: Any, name: str, value: Any) -> None:
    object.__setattr__(obj, name, value)
