#!/usr/bin/env python3

"""ISO timestamp parsing.

Decodes "yyyy-mm-ddThh:mm:ssZ" text into 32-bit unsigned seconds since the
epoch by checking each character position and folding the digits directly.
"""

from indisoluble.osm_timestamp.errors import TimestampParseError
from indisoluble.osm_timestamp.tools.civil_time import CivilTime, seconds_from_civil
from indisoluble.osm_timestamp.tools.is_valid_date_time import is_valid_date_time
from indisoluble.osm_timestamp.tools.is_valid_iso_layout import is_valid_iso_layout
from indisoluble.osm_timestamp.tools.uint32 import to_uint32


def _digits(text: str, start: int, end: int) -> int:
    value = 0
    for position in range(start, end):
        value = value * 10 + (ord(text[position]) - 48)

    return value


def parse_iso_timestamp(text: str) -> int:
    """Parse ISO timestamp text into seconds since epoch, wrapped to 32 bits.

    Raises TimestampParseError if the layout or any field is invalid.
    """
    success, error = is_valid_iso_layout(text)
    if not success:
        raise TimestampParseError(f"Invalid layout in '{text}': {error}")

    civil = CivilTime(
        year=_digits(text, 0, 4),
        month=_digits(text, 5, 7),
        day=_digits(text, 8, 10),
        hour=_digits(text, 11, 13),
        minute=_digits(text, 14, 16),
        second=_digits(text, 17, 19),
    )
    success, error = is_valid_date_time(*civil)
    if not success:
        raise TimestampParseError(f"Invalid field in '{text}': {error}")

    return to_uint32(seconds_from_civil(civil))
