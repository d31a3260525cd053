"""CSVPart - Separate a CSV file into smaller ones based on percentage."""

from csvpart.errors import AllocationError, CsvPartError, InputError, ShardWriteError
from csvpart.partition import count_lines, lines_from_percentages, parse_percentages
from csvpart.split import SplitResult, main_split, split_csv

__all__ = [
    "AllocationError",
    "CsvPartError",
    "InputError",
    "ShardWriteError",
    "SplitResult",
    "count_lines",
    "lines_from_percentages",
    "main_split",
    "parse_percentages",
    "split_csv",
]
