"""Alignment engine.

Reconciles an irregular series against a regular grid (``resample`` and its
``fill_missing`` / ``interpolate`` specializations) and aggregates samples by
time bucket or trailing window.

All functions expect the series in non-decreasing timestamp order.
"""

from __future__ import annotations

import itertools
import numbers
from typing import Any

import pandas as pd

from tsalign.core.errors import EContractViolation
from tsalign.core.types import (
    Bucketer,
    Combiner,
    DurationLike,
    Reducer,
    Sample,
    V,
)
from tsalign.series.timeseries import TimeSeries
from tsalign.time import instant_grid, to_duration


def resample(series: TimeSeries[V], delta: DurationLike, f: Combiner) -> TimeSeries[V]:
    """Resample series onto a grid with step ``delta``.

    The grid starts at the first timestamp and ends at the last grid point not
    after the last timestamp. Grid points present in the series keep their
    value. For a grid point ``tsh`` falling before the next original sample
    ``(xsh, v)`` the value is ``f((xsh, v), (next, prev), tsh)``, where
    ``next`` is the following grid point (``xsh`` for the final one) and
    ``prev`` is the last value emitted or passed over, starting at zero.

    Args:
        series: Input series
        delta: Grid step (positive)
        f: Combiner producing values for grid points missing from the series

    Returns:
        Series with one value per grid point

    Raises:
        EContractViolation: If ``delta`` is not positive
    """
    delta = to_duration(delta)
    if delta <= pd.Timedelta(0):
        raise EContractViolation(
            "Grid step must be positive",
            context={"step": str(delta)},
        )
    if series.is_empty:
        return TimeSeries.empty(series.dtype)

    grid = instant_grid(series.index[0], series.index[-1], delta)
    index = series.index
    values = series.values
    n = len(index)

    out: list[Any] = []
    prev = series.zero
    i = 0
    k = 0
    while k < len(grid) and i < n:
        tsh = grid[k]
        xsh = index[i]
        if tsh == xsh:
            prev = values[i]
            out.append(prev)
            i += 1
            k += 1
        elif tsh < xsh:
            right = grid[k + 1] if k + 1 < len(grid) else xsh
            prev = f((xsh, values[i]), (right, prev), tsh)
            out.append(prev)
            k += 1
        else:
            prev = values[i]
            i += 1

    return TimeSeries(grid, tuple(out), dtype=series.dtype)


def fill_missing(series: TimeSeries[V], delta: DurationLike, default: V) -> TimeSeries[V]:
    """Resample series, setting grid points missing from it to ``default``."""

    def f(x1: Sample, x2: Sample, tsh: pd.Timestamp) -> V:
        return default

    return resample(series, delta, f)


def interpolate(series: TimeSeries[V], delta: DurationLike) -> TimeSeries[V]:
    """Resample series, linearly interpolating grid points missing from it.

    Weights are computed from nanosecond distances converted to the element
    type, so ``float``, ``Decimal`` and ``Fraction`` series keep their type.

    Raises:
        EContractViolation: If the series holds integral values
    """
    if issubclass(series.dtype, numbers.Integral):
        raise EContractViolation(
            "interpolate requires a fractional value type",
            context={"dtype": series.dtype.__name__},
            fix_hint="Convert values first, e.g. series.map_values(float)",
        )

    dtype = series.dtype

    def f(x1: Sample, x2: Sample, tsh: pd.Timestamp) -> V:
        tx = dtype((x1[0] - tsh).value)
        ty = dtype((x2[0] - tsh).value)
        total = tx + ty
        return ty / total * x1[1] + tx / total * x2[1]

    return resample(series, delta, f)


def group_by_time(series: TimeSeries[V], g: Bucketer, f: Reducer) -> TimeSeries[Any]:
    """Aggregate consecutive samples sharing the same bucket ``g(instant)``.

    This is a single pass over runs of equal keys, so buckets must be
    non-decreasing in scan order to be grouped as a whole.

    Args:
        series: Input series
        g: Bucket key for an instant, e.g. ``tsalign.time.floor_to("D")``
        f: Reducer applied to the values of each run

    Returns:
        One ``(key, f(values))`` sample per run, in encounter order
    """
    if series.is_empty:
        return series

    keys: list[pd.Timestamp] = []
    out: list[Any] = []
    for key, run in itertools.groupby(series.items(), key=lambda item: g(item[0])):
        keys.append(key)
        out.append(f([v for _, v in run]))
    return TimeSeries(tuple(keys), tuple(out))


def rolling_window(series: TimeSeries[V], window: DurationLike, f: Reducer) -> TimeSeries[Any]:
    """Apply ``f`` to each trailing window ``(t - window, t]``.

    The series is swept from the end, keeping a left cursor on the oldest
    sample still inside the window. Samples sharing ``t`` but positioned
    after it are not part of its window. ``f`` receives the window newest
    first, so ``window[0]`` is the sample at ``t``.

    Raises:
        EContractViolation: If ``window`` is not positive
    """
    window = to_duration(window)
    if window <= pd.Timedelta(0):
        raise EContractViolation(
            "Rolling window must be positive",
            context={"window": str(window)},
        )
    if series.is_empty:
        return series

    index = series.index
    values = series.values
    out: list[Any] = []
    j = len(index) - 1
    for i in range(len(index) - 1, -1, -1):
        j = min(j, i)
        lower = index[i] - window
        while j > 0 and index[j - 1] > lower:
            j -= 1
        out.append(f(values[j : i + 1][::-1]))
    out.reverse()
    return TimeSeries(index, tuple(out))
