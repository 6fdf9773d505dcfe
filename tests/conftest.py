from __future__ import annotations

import pandas as pd
import pytest

from tsalign import TimeSeries


@pytest.fixture
def unit_series() -> TimeSeries[float]:
    """Five samples one second apart with values 1..5."""
    start = pd.Timestamp("2024-01-01")
    index = [start + pd.Timedelta(seconds=i) for i in range(5)]
    return TimeSeries(index, [1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def stats_series() -> TimeSeries[int]:
    """Integer series with mean 4 and population stddev ~3.78594."""
    return TimeSeries.from_timestamps([(1, 1), (2, -3), (3, 6), (4, 6), (5, 6), (6, 8)])


@pytest.fixture
def gappy_series() -> TimeSeries[float]:
    """Samples at 0s, 1s, 4s and 5s (gap of two steps)."""
    return TimeSeries.from_timestamps([(0, 1.0), (1, 2.0), (4, 5.0), (5, 6.0)])
