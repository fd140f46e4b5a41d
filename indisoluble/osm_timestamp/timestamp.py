#!/usr/bin/env python3

"""Timestamp value type.

Internal representation is a 32-bit unsigned integer holding seconds since
the epoch (1970-01-01T00:00:00Z), so it overflows in 2106. Unsigned is fine
because OpenStreetMap data never predates 1970. The value 0 means unset.
"""

from typing import Union

from indisoluble.osm_timestamp.minmax import register_op_start_values
from indisoluble.osm_timestamp.tools.format_iso_timestamp import format_iso_timestamp
from indisoluble.osm_timestamp.tools.parse_iso_timestamp import parse_iso_timestamp
from indisoluble.osm_timestamp.tools.uint32 import MAX_UINT32, to_uint32


class Timestamp:
    """Seconds since the epoch with an ISO "yyyy-mm-ddThh:mm:ssZ" text form."""

    @property
    def is_valid(self) -> bool:
        """Check whether the timestamp is set to something other than 0."""
        return self._seconds != 0

    def __init__(self, value: Union[int, str] = 0):
        """Initialize from seconds since epoch or from ISO text.

        Integers are wrapped to 32 bits without further checks. Text is fully
        validated and raises TimestampParseError if it can not be parsed.
        """
        if isinstance(value, str):
            self._seconds = parse_iso_timestamp(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            self._seconds = to_uint32(value)
        else:
            raise TypeError(
                f"Timestamp takes seconds since epoch or ISO text, "
                f"not '{type(value).__name__}'"
            )

    def seconds_since_epoch(self) -> int:
        return self._seconds

    def to_uint32(self) -> int:
        return self._seconds

    def to_uint64(self) -> int:
        return self._seconds

    def to_iso(self) -> str:
        """Get ISO "yyyy-mm-ddThh:mm:ssZ" text, empty if the timestamp is unset."""
        return format_iso_timestamp(self._seconds)

    def __bool__(self):
        return self._seconds != 0

    def __add__(self, time_difference: int) -> "Timestamp":
        if not isinstance(time_difference, int):
            return NotImplemented

        return Timestamp(self._seconds + time_difference)

    def __sub__(self, time_difference: int) -> "Timestamp":
        if not isinstance(time_difference, int):
            return NotImplemented

        return Timestamp(self._seconds - time_difference)

    def __eq__(self, other):
        if not isinstance(other, Timestamp):
            return False

        return self._seconds == other._seconds

    def __ne__(self, other):
        return not self == other

    def __lt__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented

        return self._seconds < other._seconds

    def __le__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented

        return self._seconds <= other._seconds

    def __gt__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented

        return self._seconds > other._seconds

    def __ge__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented

        return self._seconds >= other._seconds

    def __hash__(self):
        return hash(self._seconds)

    def __str__(self):
        return self.to_iso()

    def __repr__(self):
        return f"Timestamp({self._seconds})"


def start_of_time() -> Timestamp:
    """Get the timestamp ordered before any other valid timestamp."""
    return Timestamp(1)


def end_of_time() -> Timestamp:
    """Get the timestamp ordered after any other valid timestamp."""
    return Timestamp(MAX_UINT32)


register_op_start_values(Timestamp, end_of_time, start_of_time)
