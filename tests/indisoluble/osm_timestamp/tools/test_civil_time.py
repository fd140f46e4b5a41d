#!/usr/bin/env python3

import pytest

from indisoluble.osm_timestamp.tools.civil_time import (
    CivilTime,
    civil_from_days,
    civil_from_seconds,
    days_from_civil,
    seconds_from_civil,
)


@pytest.mark.parametrize(
    "date,days",
    [
        ((1970, 1, 1), 0),
        ((1970, 1, 2), 1),
        ((1969, 12, 31), -1),
        ((1900, 1, 1), -25567),
        ((2000, 2, 29), 11016),
        ((2000, 3, 1), 11017),
        ((2016, 7, 25), 17007),
        ((2100, 3, 1), 47541),
        ((2106, 2, 7), 49710),
    ],
)
def test_days_from_civil_and_back(date, days):
    assert days_from_civil(*date) == days
    assert civil_from_days(days) == date


def test_days_from_civil_follows_leap_year_rules():
    # 2000 is a leap year, 1900 and 2100 are not
    assert days_from_civil(2000, 3, 1) - days_from_civil(2000, 2, 28) == 2
    assert days_from_civil(1900, 3, 1) - days_from_civil(1900, 2, 28) == 1
    assert days_from_civil(2100, 3, 1) - days_from_civil(2100, 2, 28) == 1
    assert days_from_civil(2016, 3, 1) - days_from_civil(2016, 2, 28) == 2
    assert days_from_civil(2015, 3, 1) - days_from_civil(2015, 2, 28) == 1


def test_days_from_civil_rolls_over_non_existing_dates():
    assert days_from_civil(2015, 2, 29) == days_from_civil(2015, 3, 1)


def test_civil_from_days_is_consecutive():
    previous = civil_from_days(0)
    for days in range(1, 366 * 4):
        current = civil_from_days(days)
        assert current > previous
        assert days_from_civil(*current) == days
        previous = current


@pytest.mark.parametrize(
    "civil,seconds",
    [
        (CivilTime(1970, 1, 1, 0, 0, 0), 0),
        (CivilTime(1970, 1, 1, 0, 0, 1), 1),
        (CivilTime(2016, 7, 25, 9, 30, 0), 1469439000),
        (CivilTime(2106, 2, 7, 6, 28, 15), 4294967295),
        (CivilTime(1969, 12, 31, 23, 59, 59), -1),
    ],
)
def test_seconds_from_civil_and_back(civil, seconds):
    assert seconds_from_civil(civil) == seconds
    assert civil_from_seconds(seconds) == civil


def test_seconds_from_civil_rolls_leap_second_into_next_minute():
    leap = seconds_from_civil(CivilTime(2016, 12, 31, 23, 59, 60))
    assert leap == seconds_from_civil(CivilTime(2017, 1, 1, 0, 0, 0))
