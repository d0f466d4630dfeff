"""
In-place exchange sort for record sets
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class SortStats:
    """Work done by one call to bubble_sort"""

    passes: int = 0
    comparisons: int = 0
    swaps: int = 0


def is_sorted(records: list[str]) -> bool:
    """Return True if every record is <= its successor"""
    return all(records[i] <= records[i + 1] for i in range(len(records) - 1))


def bubble_sort(records: list[str]) -> SortStats:
    """
    Sort ``records`` in place with a bubble sort that stops early

    Strings compare by code point, which is the same order as comparing
    their UTF-8 bytes. Each pass swaps adjacent out-of-order records; the
    sort ends after the first pass that makes no swap, so input that is
    already sorted costs a single pass.

    Args:
        records: The record set to reorder

    Returns:
        Counters for passes, comparisons and swaps
    """
    stats = SortStats()
    last = len(records) - 1

    swapped = True
    while swapped:
        swapped = False
        stats.passes += 1
        for i in range(last):
            stats.comparisons += 1
            if records[i] > records[i + 1]:
                records[i], records[i + 1] = records[i + 1], records[i]
                stats.swaps += 1
                swapped = True

    logger.debug(
        f"Sorted {len(records)} records in {stats.passes} passes "
        f"({stats.comparisons} comparisons, {stats.swaps} swaps)"
    )
    return stats
