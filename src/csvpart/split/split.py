import logging
import time
from collections.abc import Iterable
from pathlib import Path

from csvpart.partition import count_file_lines, lines_from_percentages, parse_percentages
from csvpart.split.naming import shard_paths
from csvpart.split.types import SplitResult
from csvpart.split.write import write_shards

logger = logging.getLogger(__name__)

DONE_MESSAGE = "Done 👍"


def remove_empty_dirs(dirs: list[Path]) -> None:
    """Remove the given directories in order, stopping at the first that cannot go."""
    for directory in dirs:
        try:
            directory.rmdir()
        except OSError as exc:
            logger.warning("Could not remove %s: %s", directory, exc)
            return


def split_csv(
    input_path: str | Path,
    percentages: Iterable[str | float],
    header_lines: int = 0,
    whole: bool = False,
    output_dir: str | Path | None = None,
) -> SplitResult:
    """
    Split a file into shards sized by percentages of its data lines.

    Steps:
    1. Count newline-terminated lines in the source
    2. Parse percentages and convert them into line counts
    3. Copy headers plus each shard's lines into numbered files

    Args:
        input_path: Source file to split.
        percentages: Shard percentages, as strings or numbers, in order.
        header_lines: Lines duplicated at the top of every shard.
        whole: Add a final shard holding the lines left over.
        output_dir: Directory for shard files (default: current directory).

    Returns:
        SplitResult describing the written shards.
    """
    total_start = time.perf_counter()
    input_file = Path(input_path)
    out_dir = Path.cwd() if output_dir is None else Path(output_dir)

    logger.info(
        "Starting: file=%s, headers=%d, whole=%s, output_dir=%s",
        input_file.name,
        header_lines,
        whole,
        out_dir,
    )

    total_lines = count_file_lines(input_file)
    percs = parse_percentages(percentages)
    line_counts = lines_from_percentages(total_lines, percs, header_lines, whole)

    logger.info(
        "Counted %d lines (%d data); shard sizes: %s",
        total_lines,
        total_lines - header_lines,
        line_counts,
    )

    # Directories this call creates, deepest first.
    new_dirs = [d for d in (out_dir, *out_dir.parents) if not d.exists()]
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = shard_paths(input_file, len(line_counts), out_dir)
    try:
        written = write_shards(input_file, header_lines, line_counts, paths)
    except BaseException:
        remove_empty_dirs(new_dirs)
        raise

    total_time = time.perf_counter() - total_start
    logger.info("Result: %d shards written (total %.2fs)", len(written), total_time)

    return SplitResult(
        total_lines=total_lines,
        header_lines=header_lines,
        line_counts=line_counts,
        paths=written,
    )


def main_split(
    input_path: str | Path,
    percentages: Iterable[str | float],
    header_lines: int = 0,
    whole: bool = False,
    output_dir: str | Path | None = None,
) -> SplitResult:
    """Main entry point that reports completion on stdout."""
    result = split_csv(input_path, percentages, header_lines, whole, output_dir)
    print(DONE_MESSAGE)
    return result
