"""Tests for series/accumulation.py."""

from __future__ import annotations

from itertools import accumulate

import pandas as pd
import pytest

from tsalign import EContractViolation, TimeSeries
from tsalign.series import (
    diff_overflow,
    differentiate,
    integrate,
    integrate_by_time,
    repeat,
    shift_time,
)


def ts(seconds: float) -> pd.Timestamp:
    return pd.Timestamp(seconds, unit="s")


class TestDifferentiate:
    """Tests for differentiate."""

    def test_differences_on_tail_index(self) -> None:
        s = TimeSeries.from_timestamps([(1, 1), (2, 4), (3, 2), (4, 8)])
        result = differentiate(s)
        assert result.values == (3, -2, 6)
        assert result.index == (ts(2), ts(3), ts(4))

    def test_singleton_gives_empty(self) -> None:
        assert differentiate(TimeSeries.from_timestamps([(1, 5)])).is_empty

    def test_empty(self) -> None:
        assert differentiate(TimeSeries.empty()).is_empty

    def test_running_sum_recovers_values(self, unit_series: TimeSeries[float]) -> None:
        """First value plus the running sum of differences gives the tail."""
        first = unit_series.values[0]
        diffs = unit_series.differentiate().values
        assert tuple(first + d for d in accumulate(diffs)) == unit_series.values[1:]


class TestDiffOverflow:
    """Tests for diff_overflow."""

    def test_wraparound(self) -> None:
        """A decrease is read as a counter rollover."""
        s = TimeSeries.from_timestamps([(1, 90), (2, 5)])
        assert diff_overflow(s, 100).values == ((5 + 100) - 90,)

    def test_increase_matches_differentiate(self) -> None:
        s = TimeSeries.from_timestamps([(1, 5), (2, 9)])
        assert diff_overflow(s, 100).values == differentiate(s).values

    def test_keeps_original_index(self) -> None:
        """Differences sit on the earlier point of each pair."""
        s = TimeSeries.from_timestamps([(1, 10), (2, 20), (3, 5), (4, 15)])
        result = diff_overflow(s, 30)
        assert result.values == (10, 15, 10)
        assert result.index == (ts(1), ts(2), ts(3))

    def test_equal_values(self) -> None:
        s = TimeSeries.from_timestamps([(1, 7), (2, 7)])
        assert diff_overflow(s, 100).values == (0,)

    def test_empty(self) -> None:
        assert diff_overflow(TimeSeries.empty(), 100.0).is_empty


class TestIntegrate:
    """Tests for integrate."""

    def test_pairwise_sum(self) -> None:
        s = TimeSeries.from_timestamps([(1, 1), (2, 2), (3, 3)])
        result = integrate(s)
        assert result.values == (3, 5)
        assert result.index == (ts(2), ts(3))

    def test_empty(self) -> None:
        assert integrate(TimeSeries.empty()).is_empty


class TestIntegrateByTime:
    """Tests for integrate_by_time."""

    def test_resets_each_window(self) -> None:
        s = TimeSeries.from_timestamps([(i, 1) for i in range(7)])
        result = integrate_by_time(s, "3s")
        assert result.values == (1, 2, 3, 1, 2, 3, 1)
        assert result.index == s.index

    def test_windows_anchored_at_head(self) -> None:
        """After a gap the window containing the sample starts the sum."""
        s = TimeSeries.from_timestamps([(0, 1), (1, 1), (7, 5), (8, 1), (9, 1)])
        result = s.integrate_by_time("3s")
        # windows [0,3) [6,9) [9,12)
        assert result.values == (1, 2, 5, 6, 1)

    def test_daily_totals(self) -> None:
        s = TimeSeries.from_pairs(
            [
                ("2024-01-01 00:00", 1.0),
                ("2024-01-01 12:00", 2.0),
                ("2024-01-02 00:00", 4.0),
                ("2024-01-02 06:00", 8.0),
            ]
        )
        assert integrate_by_time(s, "1D").values == (1.0, 3.0, 4.0, 12.0)

    def test_empty(self) -> None:
        assert integrate_by_time(TimeSeries.empty(), "1s").is_empty

    def test_non_positive_window(self) -> None:
        with pytest.raises(EContractViolation):
            integrate_by_time(TimeSeries.from_timestamps([(0, 1)]), "0s")


class TestRepeat:
    """Tests for repeat."""

    def test_tiles_until_end(self) -> None:
        s = TimeSeries.from_timestamps([(0, 1), (1, 2), (2, 3), (3, 4)])
        result = repeat(s, ts(0), ts(6), "2s")
        assert result.index == tuple(ts(i) for i in range(6))
        assert result.values == (1, 2, 1, 2, 1, 2)

    def test_last_tile_may_pass_end(self) -> None:
        """Tiles are added whole while their first point is before end."""
        s = TimeSeries.from_timestamps([(0, 1), (1, 2)])
        result = s.repeat(ts(0), ts(3), "2s")
        assert result.index == (ts(0), ts(1), ts(2), ts(3))

    def test_end_at_tile_start_excluded(self) -> None:
        s = TimeSeries.from_timestamps([(0, 1), (1, 2)])
        result = repeat(s, ts(0), ts(4), "2s")
        assert len(result) == 4

    def test_empty_slice(self) -> None:
        s = TimeSeries.from_timestamps([(10, 1)])
        assert repeat(s, ts(0), ts(100), "5s").is_empty

    def test_non_positive_duration(self) -> None:
        s = TimeSeries.from_timestamps([(0, 1)])
        with pytest.raises(EContractViolation):
            repeat(s, ts(0), ts(10), "0s")


class TestShiftTime:
    """Tests for shift_time."""

    def test_forward(self) -> None:
        s = TimeSeries.from_timestamps([(1, 1), (2, 2)])
        result = shift_time(s, "10s")
        assert result.index == (ts(11), ts(12))
        assert result.values == s.values

    def test_backward(self) -> None:
        s = TimeSeries.from_timestamps([(100, 1)])
        assert s.shift_time(pd.Timedelta(minutes=1), forward=False).index == (ts(40),)

    def test_empty(self) -> None:
        assert shift_time(TimeSeries.empty(), "1s").is_empty
