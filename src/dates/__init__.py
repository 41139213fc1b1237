"""
Date value type for the exercises.

- MyDate: comparable (year, month, day) value with day and interval arithmetic
- DateRange: inclusive, lazily iterated range of dates
- TimeInterval / TimeIntervalAmount: DAY, WEEK and YEAR steps
"""

from .time_interval import TimeInterval, TimeIntervalAmount
from .my_date import MyDate, task1, task2
from .date_range import DateRange, check_in_range, iterate_over_date_range

__all__ = [
    "TimeInterval",
    "TimeIntervalAmount",
    "MyDate",
    "DateRange",
    "check_in_range",
    "iterate_over_date_range",
    "task1",
    "task2",
]
