"""Descriptive statistics over series values.

Computed in float64 whatever the element type. An empty series divides by
zero and raises ``ZeroDivisionError``; callers check ``len(series)`` first.
"""

from __future__ import annotations

import numpy as np

from tsalign.series.timeseries import TimeSeries


def _as_float(series: TimeSeries) -> np.ndarray:
    return np.asarray(series.values, dtype=np.float64)


def mean(series: TimeSeries) -> float:
    return float(_as_float(series).sum()) / len(series)


def variance(series: TimeSeries) -> float:
    """Population variance."""
    m = mean(series)
    return float(np.square(_as_float(series) - m).sum()) / len(series)


def stddev(series: TimeSeries) -> float:
    return float(np.sqrt(variance(series)))
