"""
Timing for the highlighting phase.

The recorder is a context manager around the matching work. It never
raises: if the clock cannot be read the elapsed time is reported as 0.
"""

import time
from typing import Callable, Optional

from ..core import get_logger
from .models import PerformanceStats

logger = get_logger(__name__)


class PerformanceRecorder:
    """
    Measures elapsed wall time with a high-resolution clock.

    Usage:
        with PerformanceRecorder() as recorder:
            ...
        stats = recorder.stats(term_count=3, content_length=120)
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        """
        Initialize the recorder.

        Args:
            clock: Function returning seconds as a float.
        """
        self._clock = clock
        self._start: Optional[float] = None
        self._elapsed_ms = 0.0

    def __enter__(self) -> "PerformanceRecorder":
        self._start = self._read_clock()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.stop()
        return False

    def stop(self) -> float:
        """
        Stop timing and return the elapsed milliseconds.

        Returns:
            Elapsed time in milliseconds, 0.0 if the clock failed.
        """
        end = self._read_clock()
        if self._start is None or end is None:
            self._elapsed_ms = 0.0
        else:
            self._elapsed_ms = max(0.0, (end - self._start) * 1000.0)
        return self._elapsed_ms

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    def stats(self, term_count: int, content_length: int) -> PerformanceStats:
        """Build the performance counters for a finished call."""
        return PerformanceStats(
            execution_time_ms=self._elapsed_ms,
            term_count=term_count,
            content_length=content_length
        )

    def _read_clock(self) -> Optional[float]:
        try:
            return float(self._clock())
        except Exception as e:
            logger.debug(f"Timer unavailable: {e}")
            return None


if __name__ == "__main__":
    with PerformanceRecorder() as recorder:
        sum(range(100_000))
    print(f"Elapsed: {recorder.elapsed_ms:.3f}ms")
    print(recorder.stats(term_count=2, content_length=1024))
