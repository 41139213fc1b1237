from __future__ import annotations


class Invokable:
    """Callable counter: each call bumps the counter and returns the same object."""

    def __init__(self) -> None:
        self._number_of_invocations = 0

    @property
    def number_of_invocations(self) -> int:
        return self._number_of_invocations

    def __call__(self) -> "Invokable":
        self._number_of_invocations += 1
        return self


def invoke_twice(invokable: Invokable) -> Invokable:
    return invokable()()
