"""Parsing of percentage arguments."""

import math
import re
from collections.abc import Iterable

from csvpart.errors import InputError
from csvpart.partition.types import to_float32

MAX_TOTAL_PERCENT = 100

# Plain decimal or exponent notation; no whitespace, underscores or inf/nan words.
PERCENT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_percentage(value: str | float) -> float:
    """Parse a single percentage into a single-precision float."""
    if isinstance(value, str) and not PERCENT_PATTERN.fullmatch(value):
        raise InputError(f"invalid percentage {value!r}")

    try:
        parsed = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InputError(f"invalid percentage {value!r}") from exc

    if not math.isfinite(parsed) or parsed < 0:
        raise InputError(f"percentage must be a finite non-negative number, got {value!r}")

    try:
        return to_float32(parsed)
    except OverflowError as exc:
        raise InputError(f"percentage {value!r} out of range") from exc


def parse_percentages(values: Iterable[str | float]) -> list[float]:
    """
    Parse percentages in order, checking the running total as we go.

    The sum is accumulated at single precision and checked after every value,
    so a total that exceeds 100 is rejected at the first value that crosses it.
    """
    percentages: list[float] = []
    total = 0.0
    for value in values:
        parsed = parse_percentage(value)
        total = to_float32(total + parsed)
        if total > MAX_TOTAL_PERCENT:
            raise InputError(f"supplied percentages sum larger than {MAX_TOTAL_PERCENT}")
        percentages.append(parsed)
    return percentages
