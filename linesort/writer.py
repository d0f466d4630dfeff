"""
Writing of record sets in header+lines format
"""

import logging
from pathlib import Path
from typing import TextIO

from linesort.errors import FileOpenError

logger = logging.getLogger(__name__)


def dump(records: list[str], stream: TextIO) -> None:
    """Write the count header followed by one record per line"""
    stream.write(f"{len(records)}\n")
    for record in records:
        stream.write(f"{record}\n")


def write_file(records: list[str], path: str | Path, encoding: str = "utf-8") -> None:
    """
    Write a record set to ``path``, replacing any existing file

    Records containing line breaks are written as-is and will not read
    back as a single record.

    Raises:
        FileOpenError: If the file cannot be opened for writing
    """
    try:
        f = open(path, "w", encoding=encoding, newline="\n")
    except OSError as e:
        raise FileOpenError(path, f"Unable to open output file '{path}'") from e

    with f:
        dump(records, f)

    logger.info(f"Wrote {len(records)} records to {path}")


def format_records(records: list[str]) -> str:
    """Render the record set for display on the terminal"""
    lines = ["Current contents of the array", *records]
    return "\n".join(lines)
