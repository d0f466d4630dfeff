"""
linesort: sort the lines of a counted text file with an in-place bubble sort
"""

from linesort._version import __version__
from linesort.config import Config, load_config
from linesort.errors import (
    AllocationError,
    ArgumentError,
    EmptyInputError,
    FileOpenError,
    FormatError,
    InsufficientDataError,
    LineSortError,
)
from linesort.loader import load, load_file, parse_header, read_records
from linesort.pipeline import RunResult, run
from linesort.sorter import SortStats, bubble_sort, is_sorted
from linesort.timing import Timer
from linesort.writer import dump, format_records, write_file

__all__ = [
    "__version__",
    # Pipeline
    "run",
    "RunResult",
    # Components
    "parse_header",
    "read_records",
    "load",
    "load_file",
    "bubble_sort",
    "is_sorted",
    "SortStats",
    "dump",
    "write_file",
    "format_records",
    "Timer",
    # Configuration
    "Config",
    "load_config",
    # Errors
    "LineSortError",
    "ArgumentError",
    "FileOpenError",
    "FormatError",
    "EmptyInputError",
    "InsufficientDataError",
    "AllocationError",
]
