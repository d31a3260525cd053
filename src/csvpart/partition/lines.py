"""Conversion of percentages into per-shard line counts."""

from collections.abc import Sequence

from csvpart.errors import AllocationError, InputError
from csvpart.partition.types import LineCounts, round_half_away, to_float32


def lines_from_percentages(
    total_lines: int,
    percentages: Sequence[float],
    header_lines: int = 0,
    whole: bool = False,
) -> LineCounts:
    """
    Compute how many data lines go into each shard.

    Header lines are excluded from the data line count. Every percentage is
    rounded independently (ties away from zero) using single-precision
    arithmetic. With ``whole`` set, one extra count is appended covering the
    lines the percentages left over.

    Args:
        total_lines: Newline-terminated lines in the source file.
        percentages: Shard percentages in output order.
        header_lines: Lines at the start of the file treated as headers.
        whole: Append a remainder shard when counts do not cover all lines.

    Returns:
        One line count per percentage, plus the remainder when added.
    """
    if header_lines < 0:
        raise InputError(f"header count cannot be negative, got {header_lines}")

    data_lines = total_lines - header_lines
    if data_lines < 0:
        raise InputError(
            f"headers ({header_lines}) cannot be larger than file's line count ({total_lines})"
        )

    data_lines_f32 = to_float32(data_lines)
    counts: LineCounts = []
    line_sum = 0

    for percent in percentages:
        fraction = to_float32(percent / 100)
        count = round_half_away(to_float32(fraction * data_lines_f32))
        line_sum += count
        counts.append(count)

    # line_sum == data_lines means the percentages already cover every line.
    if whole and line_sum != data_lines:
        if line_sum > data_lines:
            raise AllocationError(
                f"line sum ({line_sum}) larger than data line count ({data_lines}); "
                "attempt without --whole"
            )
        counts.append(data_lines - line_sum)

    return counts
