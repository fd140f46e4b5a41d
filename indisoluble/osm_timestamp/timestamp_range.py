#!/usr/bin/env python3

"""Closed ranges of timestamps.

Provides an inclusive [first, last] interval used to filter timestamps and
the extent of a stream of timestamps, computed by min/max reduction seeded
with the end and start of time.
"""

import logging

from typing import Iterable, Optional

from indisoluble.osm_timestamp.minmax import MaxOp, MinOp
from indisoluble.osm_timestamp.timestamp import Timestamp, end_of_time, start_of_time


class TimestampRange:
    @property
    def first(self) -> Timestamp:
        return self._first

    @property
    def last(self) -> Timestamp:
        return self._last

    def __init__(self, first: Timestamp, last: Timestamp):
        if not first.is_valid or not last.is_valid:
            raise ValueError("Range bounds must be valid timestamps")

        if last < first:
            raise ValueError(
                f"Range last '{last}' can not be before range first '{first}'"
            )

        self._first = first
        self._last = last

    @classmethod
    def unbounded(cls) -> "TimestampRange":
        return cls(start_of_time(), end_of_time())

    def contains(self, timestamp: Timestamp) -> bool:
        return self._first <= timestamp <= self._last

    def __eq__(self, other):
        if not isinstance(other, TimestampRange):
            return False

        return self.first == other.first and self.last == other.last

    def __hash__(self):
        return hash((self.first, self.last))

    def __repr__(self):
        return f"TimestampRange(first={self.first!r}, last={self.last!r})"


def timestamp_extent(timestamps: Iterable[Timestamp]) -> Optional[TimestampRange]:
    """Get the range spanned by the valid timestamps, None if there are none."""
    min_op = MinOp(Timestamp)
    max_op = MaxOp(Timestamp)
    skipped = 0
    for timestamp in timestamps:
        if not timestamp.is_valid:
            skipped += 1
            continue

        min_op.update(timestamp)
        max_op.update(timestamp)

    if skipped:
        logging.debug("Skipped %d unset timestamps computing extent", skipped)

    if max_op.value < min_op.value:
        return None

    return TimestampRange(min_op.value, max_op.value)
