"""tsalign - Immutable time series with time-aligned transforms.

A ``TimeSeries`` pairs naive ``pandas.Timestamp`` instants with numeric
values. Every transform returns a new series.

Basic usage:
    >>> from tsalign import TimeSeries
    >>> s = TimeSeries.from_timestamps([(0, 1.0), (3, 4.0)])
    >>> s.fill_missing("1s", 0.0).values
    (1.0, 0.0, 0.0, 4.0)

Alignment:
    >>> from tsalign.time import floor_to
    >>> s.fill_missing("1s", 0.0)                  # constant for missing grid points
    >>> s.resample("1s", lambda x1, x2, t: x1[1])  # custom combiner
    >>> s.group_by_time(floor_to("D"), sum)        # per-day totals
    >>> s.rolling_window("2s", max)                # trailing (t - 2s, t] windows

Tabular text:
    >>> from tsalign import from_csv, to_csv
    >>> series = from_csv("time,a,b\\n2024-01-01,1,\\n2024-01-02,2,3\\n")
    >>> [len(x) for x in series]
    [2, 1]

Preconditions:
    Transforms expect timestamps in non-decreasing order. Statistics on an
    empty series raise ``ZeroDivisionError``.
"""

__version__ = "0.1.0"

from tsalign.core.config import CsvConfig
from tsalign.core.errors import (
    ECodecParse,
    EContractViolation,
    TSAlignError,
)
from tsalign.contracts.payloads import SeriesPayload, from_payload, to_payload
from tsalign.io.tabular import from_csv, to_csv, to_csv_many
from tsalign.series import (
    TimeSeries,
    diff_overflow,
    differentiate,
    fill_missing,
    group_by_time,
    integrate,
    integrate_by_time,
    interpolate,
    mean,
    repeat,
    resample,
    rolling_window,
    shift_time,
    stddev,
    variance,
)
from tsalign.time import floor_to, instant_grid, to_duration, to_instant

__all__ = [
    "__version__",
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
    # Time
    "to_instant",
    "to_duration",
    "instant_grid",
    "floor_to",
    # Codec
    "CsvConfig",
    "from_csv",
    "to_csv",
    "to_csv_many",
    # Payloads
    "SeriesPayload",
    "to_payload",
    "from_payload",
    # Errors
    "TSAlignError",
    "EContractViolation",
    "ECodecParse",
]
