from __future__ import annotations

from typing import Any, Optional, Type

from src.dates.my_date import MyDate

MILLIS_IN_A_DAY = 24 * 60 * 60 * 1000
EPOCH = MyDate(1970, 1, 1)
_EPOCH_ORDINAL = EPOCH.to_ordinal()


def to_millis(d: MyDate) -> int:
    """Milliseconds since the epoch at UTC midnight of `d`."""
    return (d.to_ordinal() - _EPOCH_ORDINAL) * MILLIS_IN_A_DAY


def millis_to_date(millis: int) -> MyDate:
    """Date (UTC) containing the instant `millis`; floors, so pre-epoch values work."""
    return MyDate.from_ordinal(_EPOCH_ORDINAL + millis // MILLIS_IN_A_DAY)


class EffectiveDate:
    """
    Data descriptor for a MyDate attribute kept as a millisecond timestamp.

    Reading before the first write gives the epoch, 1970-01-01. Writes store
    `to_millis(value)` on the instance and reads decode it again, so what
    comes back is the normalised calendar date, not the object that was set.
    """

    def __init__(self) -> None:
        self._storage_name = "_effective_date_millis"

    def __set_name__(self, owner: Type[Any], name: str) -> None:
        self._storage_name = f"_{name}_millis"

    def __get__(self, instance: Any, owner: Optional[Type[Any]] = None):
        if instance is None:
            return self
        millis: Optional[int] = instance.__dict__.get(self._storage_name)
        if millis is None:
            return EPOCH
        return millis_to_date(millis)

    def __set__(self, instance: Any, value: MyDate) -> None:
        if not isinstance(value, MyDate):
            raise TypeError(f"expected MyDate, got {type(value).__name__}")
        instance.__dict__[self._storage_name] = to_millis(value)

    def time_in_millis(self, instance: Any) -> Optional[int]:
        """Raw stored timestamp for `instance`, or None before any write."""
        return instance.__dict__.get(self._storage_name)


class D:
    date = EffectiveDate()
