#!/usr/bin/env python3

"""Generic min/max reduction with per-type start values.

A running minimum starts at the largest value of its type and a running
maximum at the smallest one. Types bind those start values through a
registry instead of inheriting from a common base class.
"""

from typing import Any, Callable, Dict, Tuple


_start_values: Dict[type, Tuple[Callable[[], Any], Callable[[], Any]]] = {}


def register_op_start_values(
    value_type: type, min_start: Callable[[], Any], max_start: Callable[[], Any]
):
    """Bind the seeds for running minimums and maximums of a type."""
    _start_values[value_type] = (min_start, max_start)


def _lookup(value_type: type) -> Tuple[Callable[[], Any], Callable[[], Any]]:
    try:
        return _start_values[value_type]
    except KeyError:
        raise TypeError(
            f"No min/max start values registered for type '{value_type.__name__}'"
        ) from None


def min_op_start_value(value_type: type) -> Any:
    """Get the value every other value of the type is less than or equal to."""
    return _lookup(value_type)[0]()


def max_op_start_value(value_type: type) -> Any:
    """Get the value every other value of the type is greater than or equal to."""
    return _lookup(value_type)[1]()


class MinOp:
    """Running minimum seeded with the start value of its type."""

    @property
    def value(self) -> Any:
        """Get the smallest value seen, or the seed if none was."""
        return self._value

    def __init__(self, value_type: type):
        self._value = min_op_start_value(value_type)

    def update(self, value: Any):
        if value < self._value:
            self._value = value

    def __repr__(self):
        return f"MinOp(value={self._value!r})"


class MaxOp:
    """Running maximum seeded with the start value of its type."""

    @property
    def value(self) -> Any:
        """Get the largest value seen, or the seed if none was."""
        return self._value

    def __init__(self, value_type: type):
        self._value = max_op_start_value(value_type)

    def update(self, value: Any):
        if value > self._value:
            self._value = value

    def __repr__(self):
        return f"MaxOp(value={self._value!r})"


register_op_start_values(float, lambda: float("inf"), lambda: float("-inf"))
register_op_start_values(int, lambda: float("inf"), lambda: float("-inf"))
