"""Shard file naming."""

from pathlib import Path

SHARD_SUFFIX = ".csv"


def source_stem(input_path: str | Path) -> str:
    """Return the base name of input_path up to its first dot."""
    return Path(input_path).name.split(".")[0]


def shard_name(index: int, input_path: str | Path) -> str:
    """Name of the shard at index, e.g. ``0_records.csv`` for ``records.csv``."""
    return f"{index}_{source_stem(input_path)}{SHARD_SUFFIX}"


def shard_paths(input_path: str | Path, count: int, output_dir: str | Path) -> list[Path]:
    """Destination paths for count shards of input_path inside output_dir."""
    out = Path(output_dir)
    return [out / shard_name(i, input_path) for i in range(count)]
