"""Copying header and data lines from the source into shard files."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import BinaryIO

from csvpart.errors import ShardWriteError
from csvpart.partition.types import LINE_SEP
from csvpart.split.types import WRITE_BUFFER_SIZE

logger = logging.getLogger(__name__)


def read_raw_lines(source: BinaryIO, count: int) -> Iterator[bytes]:
    """
    Yield exactly count raw lines from source, terminators included.

    Raises ShardWriteError if the stream ends before count complete lines.
    """
    for i in range(count):
        line = source.readline()
        if not line.endswith(LINE_SEP):
            raise ShardWriteError(f"unexpected end of input after {i} of {count} lines")
        yield line


def remove_files(paths: Iterable[Path]) -> None:
    """Delete the given files, logging any that cannot be removed."""
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not remove %s: %s", path, exc)


def write_shards(
    input_path: str | Path,
    header_lines: int,
    line_counts: Sequence[int],
    paths: Sequence[Path],
) -> list[Path]:
    """
    Write each shard: the header bytes followed by its share of data lines.

    The source is read once, sequentially, and shards are written one after
    another in order. If anything fails, every shard created so far is
    removed before the error propagates.
    """
    if len(line_counts) != len(paths):
        raise ValueError(f"got {len(line_counts)} line counts for {len(paths)} paths")

    created: list[Path] = []

    try:
        with open(input_path, "rb") as source:
            header = b"".join(read_raw_lines(source, header_lines))

            for count, path in zip(line_counts, paths):
                with open(path, "wb", buffering=WRITE_BUFFER_SIZE) as shard:
                    created.append(path)
                    shard.write(header)
                    for line in read_raw_lines(source, count):
                        shard.write(line)
                logger.debug("Wrote %s: %d header + %d data lines", path, header_lines, count)

    except BaseException:
        if created:
            logger.warning("Removing %d partially written shard(s)", len(created))
            remove_files(created)
        raise

    return created
