#!/usr/bin/env python3

"""32-bit unsigned integer utilities.

Provides the narrowing used by timestamps, which silently wraps values
outside the 32-bit unsigned range the way an unsigned counter overflows.
"""


MAX_UINT32 = (1 << 32) - 1  # 4294967295


def to_uint32(value: int) -> int:
    """Narrow an integer to 32-bit unsigned, wrapping on overflow."""
    return value & MAX_UINT32
