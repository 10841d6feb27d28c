"""Inclusive date range value."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DateRange:
    """Start/end instant pair, inclusive on both ends."""

    start: datetime
    end: datetime

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end
