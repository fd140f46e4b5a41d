#!/usr/bin/env python3

"""ISO timestamp formatting.

Renders 32-bit unsigned seconds since the epoch as "yyyy-mm-ddThh:mm:ssZ".
"""

from indisoluble.osm_timestamp.tools.civil_time import civil_from_seconds


def format_iso_timestamp(seconds: int) -> str:
    """Format seconds since epoch as ISO text, empty string for 0 (unset)."""
    if seconds == 0:
        return ""

    civil = civil_from_seconds(seconds)
    return (
        f"{civil.year:04d}-{civil.month:02d}-{civil.day:02d}"
        f"T{civil.hour:02d}:{civil.minute:02d}:{civil.second:02d}Z"
    )
