from __future__ import annotations

from calendar import isleap
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .time_interval import TimeInterval, TimeIntervalAmount

if TYPE_CHECKING:
    from .date_range import DateRange


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461


def _days_in_month(year: int, month: int) -> int:
    if month == 2 and isleap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _days_before_year(year: int) -> int:
    # floor division keeps this valid for year <= 0 too
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _days_before_month(year: int, month: int) -> int:
    return sum(_days_in_month(year, m) for m in range(1, month))


@dataclass(frozen=True, order=True)
class MyDate:
    """
    Minimal calendar date: (year, month, day_of_month), months 1-based.

    Ordering is lexicographic over (year, month, day). Fields are not
    validated; arithmetic normalises out-of-range values leniently, so
    MyDate(2021, 1, 32) behaves like 1 February 2021. Any integer year is
    accepted, using the proleptic Gregorian leap-year rule.
    """
    year: int
    month: int
    day_of_month: int

    # ------------------------------------------------------------------ #
    # Comparison
    # ------------------------------------------------------------------ #

    def compare_to(self, other: "MyDate") -> int:
        """Negative, zero or positive as self is before, equal to or after `other`."""
        years_diff = self.year - other.year
        if years_diff != 0:
            return years_diff
        months_diff = self.month - other.month
        if months_diff != 0:
            return months_diff
        return self.day_of_month - other.day_of_month

    # ------------------------------------------------------------------ #
    # Day arithmetic
    # ------------------------------------------------------------------ #

    def to_ordinal(self) -> int:
        """Proleptic Gregorian ordinal (1 January of year 1 is 1)."""
        # fold months outside 1..12 into the year first, then add days to the 1st
        y, m0 = divmod(self.month - 1, 12)
        year, month = self.year + y, m0 + 1
        first_of_month = _days_before_year(year) + _days_before_month(year, month) + 1
        return first_of_month + self.day_of_month - 1

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "MyDate":
        n = ordinal - 1
        n400, n = divmod(n, _DAYS_IN_400_YEARS)
        n100, n = divmod(n, _DAYS_IN_100_YEARS)
        n4, n = divmod(n, _DAYS_IN_4_YEARS)
        n1, n = divmod(n, 365)
        year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
        if n1 == 4 or n100 == 4:
            # last day of a leap cycle
            return cls(year - 1, 12, 31)

        month = 1
        while n >= _days_in_month(year, month):
            n -= _days_in_month(year, month)
            month += 1
        return cls(year, month, n + 1)

    def normalized(self) -> "MyDate":
        """The real calendar date this value stands for."""
        return MyDate.from_ordinal(self.to_ordinal())

    def plus_days(self, days: int) -> "MyDate":
        return MyDate.from_ordinal(self.to_ordinal() + days)

    def following_date(self) -> "MyDate":
        return self.plus_days(1)

    # ------------------------------------------------------------------ #
    # Interval arithmetic
    # ------------------------------------------------------------------ #

    def _plus_one_year(self, step: int) -> "MyDate":
        # same month and day, one year forward or back (29 Feb rolls to 1 Mar)
        return MyDate(self.year + step, self.month, self.day_of_month).normalized()

    def add_time_intervals(self, time_interval: TimeInterval, amount: int) -> "MyDate":
        """
        DAY adds `amount` days and WEEK adds 7 * `amount` days. YEAR is
        applied as `amount` single-year steps, so YEAR * n always equals
        adding YEAR n times.
        """
        if time_interval is TimeInterval.DAY:
            return self.plus_days(amount)
        if time_interval is TimeInterval.WEEK:
            return self.plus_days(7 * amount)
        if time_interval is TimeInterval.YEAR:
            step = 1 if amount >= 0 else -1
            result = self.normalized()
            for _ in range(abs(amount)):
                result = result._plus_one_year(step)
            return result
        raise ValueError(f"Unsupported time interval: {time_interval!r}")

    def __add__(self, other: Union[TimeInterval, TimeIntervalAmount]) -> "MyDate":
        if isinstance(other, TimeInterval):
            return self.add_time_intervals(other, 1)
        if isinstance(other, TimeIntervalAmount):
            return self.add_time_intervals(other.time_interval, other.amount)
        return NotImplemented

    # ------------------------------------------------------------------ #
    # Ranges
    # ------------------------------------------------------------------ #

    def range_to(self, other: "MyDate") -> "DateRange":
        from .date_range import DateRange
        return DateRange(self, other)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day_of_month:02d}"


def task1(today: MyDate) -> MyDate:
    return today + TimeInterval.YEAR + TimeInterval.WEEK


def task2(today: MyDate) -> MyDate:
    return today + TimeInterval.YEAR * 2 + TimeInterval.WEEK * 3 + TimeInterval.DAY * 5
