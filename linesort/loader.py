"""
Loading of header+lines record files
"""

import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from linesort.errors import (
    AllocationError,
    EmptyInputError,
    FileOpenError,
    FormatError,
    InsufficientDataError,
)

logger = logging.getLogger(__name__)

# Leading whitespace, optional sign, digits; anything after the digits is ignored
_HEADER_RE = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def _readline(stream: TextIO, line_buffer_size: int | None) -> str:
    if line_buffer_size is None:
        return stream.readline()
    # Room for the terminator, as with a fixed C buffer
    return stream.readline(line_buffer_size - 1)


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse_header(line: str) -> int:
    """
    Parse the record count from a header line

    Args:
        line: The first line of the input, with or without its terminator

    Returns:
        The declared number of records

    Raises:
        FormatError: If no integer can be parsed or the count is not positive
    """
    match = _HEADER_RE.match(line)
    if match is None:
        raise FormatError(f"Header {line.rstrip()!r} does not start with a record count")

    count = int(match.group(1))
    if count <= 0:
        raise FormatError(f"Header declares {count} records, expected a positive count")
    return count


def read_records(
    stream: TextIO,
    count: int,
    line_buffer_size: int | None = None,
    strict: bool = False,
) -> list[str]:
    """
    Read exactly ``count`` records from ``stream``

    Only the trailing newline of each line is removed. Lines past ``count``
    are ignored unless ``strict`` is set.

    Raises:
        InsufficientDataError: If the stream ends before ``count`` lines
        FormatError: If ``strict`` and the stream has more lines
        AllocationError: If memory runs out while building the record set
    """
    records: list[str] = []
    try:
        for _ in range(count):
            line = _readline(stream, line_buffer_size)
            if not line:
                raise InsufficientDataError(count, len(records))
            records.append(_strip_terminator(line))
    except MemoryError as e:
        raise AllocationError(f"Unable to allocate {count} records") from e

    if strict and _readline(stream, line_buffer_size):
        raise FormatError(f"Input has more than the {count} lines declared in its header")

    return records


def load(
    stream: TextIO,
    line_buffer_size: int | None = None,
    strict: bool = False,
    on_count: Callable[[int], None] | None = None,
) -> list[str]:
    """
    Read the header and then the records it declares from an open stream

    ``on_count`` is called with the declared count once the header parses,
    before any record is read.
    """
    header = _readline(stream, line_buffer_size)
    if not header:
        raise EmptyInputError("Input file seems to be empty")

    count = parse_header(header)
    logger.debug(f"Header declares {count} records")
    if on_count is not None:
        on_count(count)
    return read_records(stream, count, line_buffer_size=line_buffer_size, strict=strict)


def load_file(
    path: str | Path,
    encoding: str = "utf-8",
    line_buffer_size: int | None = None,
    strict: bool = False,
    on_count: Callable[[int], None] | None = None,
) -> list[str]:
    """
    Load a record set from a file

    Raises:
        FileOpenError: If the file cannot be opened for reading
        FormatError: If the file is not valid text in ``encoding``
    """
    try:
        f = open(path, encoding=encoding, newline="\n")
    except OSError as e:
        raise FileOpenError(path) from e

    with f:
        try:
            records = load(
                f, line_buffer_size=line_buffer_size, strict=strict, on_count=on_count
            )
        except UnicodeDecodeError as e:
            raise FormatError(
                f"Input file {path} is not valid {encoding} text "
                f"(undecodable byte {e.object[e.start]:#04x})"
            ) from e

    logger.info(f"Loaded {len(records)} records from {path}")
    return records
