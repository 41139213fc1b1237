from __future__ import annotations

from functools import cached_property
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class PropertyExample:
    """`property_with_counter` counts how many times it has been assigned."""

    def __init__(self) -> None:
        self.counter = 0
        self._property_with_counter: Optional[int] = None

    @property
    def property_with_counter(self) -> Optional[int]:
        return self._property_with_counter

    @property_with_counter.setter
    def property_with_counter(self, value: Optional[int]) -> None:
        self._property_with_counter = value
        self.counter += 1


class LazyProperty(Generic[T]):
    """
    `lazy_value` runs `initializer` on first read and caches whatever it
    returned (None included); later reads never call it again.
    """

    def __init__(self, initializer: Callable[[], T]) -> None:
        self.initializer = initializer

    @cached_property
    def lazy_value(self) -> T:
        return self.initializer()
