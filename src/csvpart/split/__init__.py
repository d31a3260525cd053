from csvpart.split.split import main_split, split_csv
from csvpart.split.types import SplitResult

__all__ = ["SplitResult", "main_split", "split_csv"]
