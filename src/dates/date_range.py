from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from .my_date import MyDate


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive range of dates [start, end], stepping one day at a time.

    Iteration is lazy and restartable: every `iter()` walks again from
    `start`. Both ends are normalised first, so MyDate(2021, 0, 5) is read
    as 5 December 2020 and only real calendar dates are yielded. A range
    whose start is after its end is empty.
    """
    start: MyDate
    end: MyDate

    def __iter__(self) -> Iterator[MyDate]:
        current = self.start.normalized()
        end = self.end.normalized()
        if current > end:
            return
        while True:
            yield current
            if current == end:
                return
            current = current.following_date()

    def __contains__(self, d: object) -> bool:
        if not isinstance(d, MyDate):
            return False
        return self.start.normalized() <= d.normalized() <= self.end.normalized()

    def is_empty(self) -> bool:
        return self.start.normalized() > self.end.normalized()


def check_in_range(d: MyDate, first: MyDate, last: MyDate) -> bool:
    return d in first.range_to(last)


def iterate_over_date_range(first: MyDate, last: MyDate, handler: Callable[[MyDate], None]) -> None:
    for d in first.range_to(last):
        handler(d)
