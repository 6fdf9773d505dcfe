"""Accumulation transforms.

Single-pass differencing, summing and re-timing of a series.
"""

from __future__ import annotations

import pandas as pd

from tsalign.core.errors import EContractViolation
from tsalign.core.types import DurationLike, InstantLike, V
from tsalign.series.timeseries import TimeSeries
from tsalign.time import to_duration, to_instant


def differentiate(series: TimeSeries[V]) -> TimeSeries[V]:
    """Difference between consecutive points, indexed by the later point."""
    if series.is_empty:
        return series

    values = series.values
    diffs = tuple(b - a for a, b in zip(values, values[1:]))
    return TimeSeries(series.index[1:], diffs, dtype=series.dtype)


def diff_overflow(series: TimeSeries[V], overflow_value: V) -> TimeSeries[V]:
    """Difference between consecutive points of a wrapping counter.

    Counters that roll over to zero after reaching ``overflow_value`` produce
    a decrease; such a pair yields ``(b + overflow_value) - a``.

    Unlike ``differentiate`` the result keeps the original index, so after
    truncation each difference sits on the earlier point of its pair.
    """
    if series.is_empty:
        return series

    values = series.values
    diffs = tuple((b + overflow_value) - a if b < a else b - a for a, b in zip(values, values[1:]))
    return TimeSeries(series.index, diffs, dtype=series.dtype)


def integrate(series: TimeSeries[V]) -> TimeSeries[V]:
    """Sum of consecutive points, indexed by the later point."""
    if series.is_empty:
        return series

    values = series.values
    sums = tuple(a + b for a, b in zip(values, values[1:]))
    return TimeSeries(series.index[1:], sums, dtype=series.dtype)


def integrate_by_time(series: TimeSeries[V], window: DurationLike) -> TimeSeries[V]:
    """Running sum restarted at every window boundary.

    Windows are ``[head + k*window, head + (k+1)*window)`` and do not
    overlap. Each output value is the sum since the start of its window,
    current point included.

    Raises:
        EContractViolation: If ``window`` is not positive
    """
    window = to_duration(window)
    if window <= pd.Timedelta(0):
        raise EContractViolation(
            "Integration window must be positive",
            context={"window": str(window)},
        )
    if series.is_empty:
        return series

    end = series.index[0] + window
    acc = series.zero
    out: list[V] = []
    for t, v in series.items():
        if t < end:
            acc = acc + v
        else:
            while end <= t:
                end += window
            acc = v
        out.append(acc)
    return TimeSeries(series.index, tuple(out), dtype=series.dtype)


def repeat(
    series: TimeSeries[V],
    start: InstantLike,
    end: InstantLike,
    duration: DurationLike,
) -> TimeSeries[V]:
    """Tile the slice ``[start, start + duration)`` up to ``end``.

    Copy ``k`` is shifted by ``k * duration``; copies are added while their
    first timestamp is before ``end``.

    Raises:
        EContractViolation: If ``duration`` is not positive
    """
    duration = to_duration(duration)
    if duration <= pd.Timedelta(0):
        raise EContractViolation(
            "Repeat duration must be positive",
            context={"duration": str(duration)},
        )
    start = to_instant(start)
    end = to_instant(end)

    tile = series.slice(start, start + duration)
    if tile.is_empty:
        return tile

    index: list[pd.Timestamp] = []
    values: list[V] = []
    offset = pd.Timedelta(0)
    while tile.index[0] + offset < end:
        index.extend(t + offset for t in tile.index)
        values.extend(tile.values)
        offset += duration
    return TimeSeries(tuple(index), tuple(values), dtype=series.dtype)


def shift_time(series: TimeSeries[V], duration: DurationLike, forward: bool = True) -> TimeSeries[V]:
    """Move every timestamp by ``duration``, later when ``forward``."""
    duration = to_duration(duration)
    if not forward:
        duration = -duration
    return TimeSeries(
        tuple(t + duration for t in series.index),
        series.values,
        dtype=series.dtype,
    )
