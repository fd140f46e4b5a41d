#!/usr/bin/env python3

"""ISO timestamp layout validation.

Checks the fixed character layout "yyyy-mm-ddThh:mm:ssZ" position by
position, without looking at the values of the digit groups.
"""

from typing import Tuple


ISO_TIMESTAMP_LENGTH = 20

_SEPARATORS = {4: "-", 7: "-", 10: "T", 13: ":", 16: ":", 19: "Z"}


def is_valid_iso_layout(text: str) -> Tuple[bool, str]:
    """Validate length, digit positions and separators of an ISO timestamp."""
    if len(text) != ISO_TIMESTAMP_LENGTH:
        return (False, f"It must be exactly {ISO_TIMESTAMP_LENGTH} characters long")

    for position in range(ISO_TIMESTAMP_LENGTH):
        char = text[position]
        separator = _SEPARATORS.get(position)
        if separator is not None:
            if char != separator:
                return (False, f"Expected '{separator}' at position {position}")
        elif not ("0" <= char <= "9"):
            return (False, f"Expected a digit at position {position}")

    return (True, "")
