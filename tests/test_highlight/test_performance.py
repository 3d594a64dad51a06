"""
Tests for the performance recorder.
"""

import pytest

from search_highlighting.highlight.performance import PerformanceRecorder


def make_clock(*readings):
    """Build a fake clock returning the given readings in order."""
    values = iter(readings)
    return lambda: next(values)


class TestPerformanceRecorder:
    """Tests for PerformanceRecorder."""

    def test_measures_elapsed_milliseconds(self):
        """Test that elapsed time is converted to milliseconds."""
        with PerformanceRecorder(clock=make_clock(1.0, 1.5)) as recorder:
            pass

        assert recorder.elapsed_ms == pytest.approx(500.0)

    def test_real_clock_is_non_negative(self):
        """Test timing with the default clock."""
        with PerformanceRecorder() as recorder:
            sum(range(1000))

        assert recorder.elapsed_ms >= 0

    def test_failing_clock_reports_zero(self):
        """Test that an unreadable clock yields 0 instead of raising."""
        def broken():
            raise OSError("no timer")

        with PerformanceRecorder(clock=broken) as recorder:
            pass

        assert recorder.elapsed_ms == 0.0

    def test_backwards_clock_clamped(self):
        """Test that a clock going backwards never gives negative time."""
        with PerformanceRecorder(clock=make_clock(2.0, 1.0)) as recorder:
            pass

        assert recorder.elapsed_ms == 0.0

    def test_stats(self):
        """Test building the performance counters."""
        with PerformanceRecorder(clock=make_clock(0.0, 0.002)) as recorder:
            pass

        stats = recorder.stats(term_count=3, content_length=120)

        assert stats.execution_time_ms == pytest.approx(2.0)
        assert stats.term_count == 3
        assert stats.content_length == 120

    def test_exceptions_propagate(self):
        """Test that errors inside the block are not swallowed."""
        with pytest.raises(ValueError):
            with PerformanceRecorder():
                raise ValueError("inside")
