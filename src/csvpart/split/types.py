"""Result structures for file splitting."""

from dataclasses import dataclass, field
from pathlib import Path

# 1MB buffer for shard writes.
WRITE_BUFFER_SIZE = 1024 * 1024


@dataclass(frozen=True, slots=True)
class SplitResult:
    """Outcome of a successful split: line accounting and written shard paths."""

    total_lines: int
    header_lines: int
    line_counts: list[int] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)

    @property
    def data_lines(self) -> int:
        return self.total_lines - self.header_lines
