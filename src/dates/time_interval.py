from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TimeInterval(str, Enum):
    """Intervals that can be added to a MyDate."""
    DAY = "Day"
    WEEK = "Week"
    YEAR = "Year"

    def __mul__(self, amount: int) -> "TimeIntervalAmount":
        if not isinstance(amount, int) or isinstance(amount, bool):
            return NotImplemented
        return TimeIntervalAmount(self, amount)

    __rmul__ = __mul__


@dataclass(frozen=True)
class TimeIntervalAmount:
    """`amount` repetitions of one interval, e.g. WEEK * 3."""
    time_interval: TimeInterval
    amount: int
