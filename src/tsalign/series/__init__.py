"""Series module for tsalign.

Provides the TimeSeries container and its transforms.
"""

from .accumulation import (
    diff_overflow,
    differentiate,
    integrate,
    integrate_by_time,
    repeat,
    shift_time,
)
from .alignment import fill_missing, group_by_time, interpolate, resample, rolling_window
from .stats import mean, stddev, variance
from .timeseries import TimeSeries

__all__ = [
    # Container
    "TimeSeries",
    # Alignment
    "resample",
    "fill_missing",
    "interpolate",
    "group_by_time",
    "rolling_window",
    # Accumulation
    "differentiate",
    "diff_overflow",
    "integrate",
    "integrate_by_time",
    "repeat",
    "shift_time",
    # Statistics
    "mean",
    "variance",
    "stddev",
]
