"""Shared constants and numeric helpers for partitioning."""

import math
import struct
from typing import TypeAlias

# 32KB read buffer for line counting.
BUFFER_SIZE = 32 * 1024

LINE_SEP = b"\n"

LineCounts: TypeAlias = list[int]

_FLOAT32 = struct.Struct("<f")


def to_float32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
