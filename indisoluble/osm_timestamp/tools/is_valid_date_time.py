#!/usr/bin/env python3

"""Date and time field range validation.

Bounds the day of month with a fixed table where February always has 29
days, so February 29 is accepted in every year.
"""

from typing import Tuple


_MIN_YEAR = 1900
_MONTH_LENGTHS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_valid_date_time(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> Tuple[bool, str]:
    """Validate calendar fields, month being 1-based and second up to 60."""
    if year < _MIN_YEAR:
        return (False, f"Year must not be before {_MIN_YEAR}")

    if not (1 <= month <= 12):
        return (False, "Month must be between 1 and 12")

    max_day = _MONTH_LENGTHS[month - 1]
    if not (1 <= day <= max_day):
        return (False, f"Day must be between 1 and {max_day}")

    if not (0 <= hour <= 23):
        return (False, "Hour must be between 0 and 23")

    if not (0 <= minute <= 59):
        return (False, "Minute must be between 0 and 59")

    if not (0 <= second <= 60):
        return (False, "Second must be between 0 and 60")

    return (True, "")
