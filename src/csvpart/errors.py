"""Exception types raised while partitioning and splitting files."""


class CsvPartError(Exception):
    """Base class for all csvpart errors."""


class InputError(CsvPartError, ValueError):
    """Invalid header count or percentage values."""


class AllocationError(CsvPartError, ValueError):
    """Percentage line counts already exceed the available data lines."""


class ShardWriteError(CsvPartError, OSError):
    """Source file ran out of lines while a shard was being written."""
