"""
Wall-clock timing of pipeline steps
"""

import time


class Timer:
    """
    Context manager measuring elapsed wall-clock time

    Example:
        with Timer() as timer:
            bubble_sort(records)
        print(timer.elapsed_us)
    """

    def __init__(self):
        self._start: int | None = None
        self.elapsed_ns: int = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_ns = time.perf_counter_ns() - self._start

    @property
    def elapsed_us(self) -> int:
        return self.elapsed_ns // 1000

    def per_item(self, count: int) -> int:
        """Elapsed microseconds per item, rounded down"""
        if count <= 0:
            return 0
        return self.elapsed_us // count
