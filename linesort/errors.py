"""
Error taxonomy for linesort

Every error carries the process exit code the CLI reports it with.
"""


class LineSortError(Exception):
    """Base class for all linesort failures"""

    exit_code: int = 1


class ArgumentError(LineSortError):
    """Invalid command-line arguments

    ``arity`` is set when positional arguments are missing or left over.
    """

    exit_code = 1

    def __init__(self, message: str, arity: bool = False):
        self.arity = arity
        super().__init__(message)


class FileOpenError(LineSortError, OSError):
    """An input or output path could not be opened"""

    exit_code = 1

    def __init__(self, path, message: str | None = None):
        self.path = str(path)
        super().__init__(message or f"Unable to open file '{self.path}'")


class FormatError(LineSortError, ValueError):
    """The input does not have the expected header+lines format"""

    exit_code = 3


class EmptyInputError(FormatError):
    """The input file has no header line at all"""

    exit_code = 2


class InsufficientDataError(FormatError):
    """The input ended before the declared number of lines was read"""

    exit_code = 5

    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected} lines but input ended after {found}")


class AllocationError(LineSortError, MemoryError):
    """The record set could not be allocated"""

    exit_code = 4
