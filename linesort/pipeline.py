"""
Load, sort and write one record file
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from linesort.config import Config
from linesort.loader import load_file
from linesort.sorter import SortStats, bubble_sort
from linesort.timing import Timer
from linesort.writer import write_file

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a completed run"""

    input_path: str
    output_path: str
    count: int
    elapsed_us: int
    per_item_us: int
    stats: SortStats = field(default_factory=SortStats)
    records: list[str] = field(default_factory=list, repr=False)


def _silent(message: str) -> None:
    pass


def run(
    input_path: str | Path,
    output_path: str | Path,
    config: Config | None = None,
    report: Callable[[str], None] | None = None,
) -> RunResult:
    """
    Sort the records of ``input_path`` into ``output_path``

    Args:
        input_path: File with a count header followed by the records
        output_path: File to write the sorted records to
        config: Run settings; defaults apply when omitted
        report: Called with each progress line as its stage completes, so
            lines already reported survive a failure in a later stage

    Errors from loading or writing propagate unchanged; nothing is written
    when loading fails.
    """
    config = config or Config()
    report = report or _silent

    records = load_file(
        input_path,
        encoding=config.encoding,
        line_buffer_size=config.line_buffer_size,
        strict=config.strict,
        on_count=lambda n: report(f"Input file {input_path} contains {n} items to sort"),
    )
    count = len(records)

    with Timer() as timer:
        stats = bubble_sort(records)
    logger.info(f"Sorting {count} items took {timer.elapsed_us} microseconds")
    report(f"Sorting {count} items required {timer.elapsed_us} microseconds")
    report(f"({timer.per_item(count)} microseconds per item)")

    write_file(records, output_path, encoding=config.encoding)

    return RunResult(
        input_path=str(input_path),
        output_path=str(output_path),
        count=count,
        elapsed_us=timer.elapsed_us,
        per_item_us=timer.per_item(count),
        stats=stats,
        records=records,
    )
