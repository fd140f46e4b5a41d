#!/usr/bin/env python3

"""UTC calendar arithmetic for seconds since the epoch.

Converts between proleptic Gregorian calendar fields and seconds since
1970-01-01T00:00:00Z, accounting for leap years and ignoring time zones,
daylight saving time and leap seconds.
"""

from typing import NamedTuple, Tuple


_SECONDS_PER_DAY = 86400
_DAYS_PER_ERA = 146097  # 400 years
_DAYS_FROM_0000_03_01_TO_EPOCH = 719468


class CivilTime(NamedTuple):
    """UTC calendar breakdown, month and day being 1-based."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since the epoch, with years counted from March."""
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )

    return era * _DAYS_PER_ERA + day_of_era - _DAYS_FROM_0000_03_01_TO_EPOCH


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """Calendar (year, month, day) of a count of days since the epoch."""
    days += _DAYS_FROM_0000_03_01_TO_EPOCH
    era = days // _DAYS_PER_ERA
    day_of_era = days - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (_DAYS_PER_ERA - 1)
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + (3 if shifted_month < 10 else -9)
    year = year_of_era + era * 400 + (month <= 2)

    return (year, month, day)


def seconds_from_civil(civil: CivilTime) -> int:
    """Seconds since the epoch, negative before 1970."""
    days = days_from_civil(civil.year, civil.month, civil.day)
    return (
        days * _SECONDS_PER_DAY + civil.hour * 3600 + civil.minute * 60 + civil.second
    )


def civil_from_seconds(seconds: int) -> CivilTime:
    """UTC calendar breakdown of seconds since the epoch."""
    days, seconds_of_day = divmod(seconds, _SECONDS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rest = divmod(seconds_of_day, 3600)
    minute, second = divmod(rest, 60)

    return CivilTime(year, month, day, hour, minute, second)
