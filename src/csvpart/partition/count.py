"""Newline counting over binary streams."""

from pathlib import Path
from typing import BinaryIO

from csvpart.partition.types import BUFFER_SIZE, LINE_SEP


def count_lines(stream: BinaryIO) -> int:
    """
    Count newline bytes in a stream until end-of-stream.

    A final line without a terminating newline is not counted.
    """
    count = 0
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if not chunk:
            return count
        count += chunk.count(LINE_SEP)


def count_file_lines(path: str | Path) -> int:
    """Count newline-terminated lines in the file at path."""
    with open(path, "rb") as handle:
        return count_lines(handle)
