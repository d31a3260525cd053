from csvpart.partition.count import count_file_lines, count_lines
from csvpart.partition.lines import lines_from_percentages
from csvpart.partition.percent import parse_percentage, parse_percentages

__all__ = [
    "count_file_lines",
    "count_lines",
    "lines_from_percentages",
    "parse_percentage",
    "parse_percentages",
]
