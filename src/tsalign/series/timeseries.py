"""TimeSeries implementation.

Immutable container pairing a timestamp index with values. All operations
return new instances; nothing mutates an existing series.

Transforms assume the index is in non-decreasing order. Unsorted input is
not corrected and gives undefined (but non-crashing) results.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic

import pandas as pd

from tsalign.core.types import (
    Bucketer,
    Combiner,
    DurationLike,
    Instant,
    InstantLike,
    Reducer,
    V,
)
from tsalign.time import to_instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeSeries(Generic[V]):
    """Paired sequence of instants and values.

    Attributes:
        index: Timestamps, naive ``pd.Timestamp`` on one UTC axis
        values: Values, any numeric type supporting ``+``, ``-``, ``*``,
            ordering and construction from ``0``
        dtype: Element type used to build the numeric zero. Inferred from
            the values: the first non-integral value wins, so ``(1, 4.0)``
            is a float series. ``float`` for an empty series.

    If ``index`` and ``values`` differ in length both are truncated to the
    shorter one. This is the only construction path, so every derived series
    goes through the same rule.

    Examples:
        >>> s = TimeSeries.from_timestamps([(1, 1.0), (2, 3.0), (4, 5.0)])
        >>> s.fill_missing("1s", 0.0).values
        (1.0, 3.0, 0.0, 5.0)
    """

    index: tuple[Instant, ...] = ()
    values: tuple[V, ...] = ()
    dtype: type | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        index = tuple(to_instant(t) for t in self.index)
        values = tuple(self.values)

        length = min(len(index), len(values))
        if len(index) != len(values):
            logger.debug(
                "Truncating series to %d points (index=%d, values=%d)",
                length,
                len(index),
                len(values),
            )
            index = index[:length]
            values = values[:length]

        dtype = self.dtype
        if dtype is None:
            dtype = _infer_dtype(values)

        object.__setattr__(self, "index", index)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "dtype", dtype)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_timestamps(cls, rows: Iterable[tuple[float, V]]) -> TimeSeries[V]:
        """Create series from ``(epoch_seconds, value)`` pairs."""
        rows = list(rows)
        return cls(
            tuple(pd.Timestamp(t, unit="s") for t, _ in rows),
            tuple(v for _, v in rows),
        )

    @classmethod
    def from_pairs(cls, rows: Iterable[tuple[InstantLike, V]]) -> TimeSeries[V]:
        """Create series from ``(instant, value)`` pairs."""
        rows = list(rows)
        return cls(tuple(t for t, _ in rows), tuple(v for _, v in rows))

    @classmethod
    def empty(cls, dtype: type = float) -> TimeSeries[Any]:
        """Create an empty series of the given element type."""
        return cls((), (), dtype=dtype)

    @classmethod
    def from_pandas(cls, series: pd.Series) -> TimeSeries[Any]:
        """Create series from a ``pd.Series`` indexed by datetimes.

        Raises:
            ValueError: If the index is not datetime typed
        """
        if not pd.api.types.is_datetime64_any_dtype(series.index):
            raise ValueError("Series index must be datetime type")
        return cls(tuple(series.index), tuple(series.tolist()))

    @classmethod
    def from_json(cls, text: str | bytes) -> TimeSeries[Any]:
        """Create series from a JSON ``SeriesPayload`` document."""
        from tsalign.contracts.payloads import SeriesPayload, from_payload

        return from_payload(SeriesPayload.model_validate_json(text))

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.index)

    @property
    def is_empty(self) -> bool:
        return len(self.index) == 0

    @property
    def zero(self) -> V:
        """Numeric zero of the element type."""
        return self.dtype(0)

    def get(self, i: int) -> V:
        """Safe get. Out-of-range positions return the numeric zero."""
        if 0 <= i < len(self.values):
            return self.values[i]
        return self.zero

    @property
    def head(self) -> tuple[Instant, V] | None:
        if self.is_empty:
            return None
        return self.index[0], self.values[0]

    @property
    def last(self) -> tuple[Instant, V] | None:
        if self.is_empty:
            return None
        return self.index[-1], self.values[-1]

    def items(self) -> Iterator[tuple[Instant, V]]:
        """Iterate over ``(instant, value)`` pairs."""
        return zip(self.index, self.values)

    # ------------------------------------------------------------------
    # Element-wise operations
    # ------------------------------------------------------------------

    def filter(self, predicate: Callable[[Instant, V], bool]) -> TimeSeries[V]:
        """Keep the samples for which ``predicate(instant, value)`` holds."""
        kept = [(t, v) for t, v in self.items() if predicate(t, v)]
        return TimeSeries(
            tuple(t for t, _ in kept),
            tuple(v for _, v in kept),
            dtype=self.dtype,
        )

    def map(self, fn: Callable[[Instant, V], Any]) -> TimeSeries[Any]:
        """Replace each value with ``fn(instant, value)``."""
        values = tuple(fn(t, v) for t, v in self.items())
        return TimeSeries(self.index, values, dtype=None if values else self.dtype)

    def map_values(self, fn: Callable[[V], Any]) -> TimeSeries[Any]:
        """Replace each value with ``fn(value)``."""
        values = tuple(fn(v) for v in self.values)
        return TimeSeries(self.index, values, dtype=None if values else self.dtype)

    def slice(self, start: InstantLike, end: InstantLike) -> TimeSeries[V]:
        """Samples with ``start <= instant < end``."""
        start = to_instant(start)
        end = to_instant(end)
        return self.filter(lambda t, _: start <= t < end)

    # ------------------------------------------------------------------
    # Transforms (see tsalign.series.alignment / accumulation / stats)
    # ------------------------------------------------------------------

    def resample(self, delta: DurationLike, f: Combiner) -> TimeSeries[V]:
        from tsalign.series.alignment import resample

        return resample(self, delta, f)

    def fill_missing(self, delta: DurationLike, default: V) -> TimeSeries[V]:
        from tsalign.series.alignment import fill_missing

        return fill_missing(self, delta, default)

    def interpolate(self, delta: DurationLike) -> TimeSeries[V]:
        from tsalign.series.alignment import interpolate

        return interpolate(self, delta)

    def group_by_time(self, g: Bucketer, f: Reducer) -> TimeSeries[Any]:
        from tsalign.series.alignment import group_by_time

        return group_by_time(self, g, f)

    def rolling_window(self, window: DurationLike, f: Reducer) -> TimeSeries[Any]:
        from tsalign.series.alignment import rolling_window

        return rolling_window(self, window, f)

    def differentiate(self) -> TimeSeries[V]:
        from tsalign.series.accumulation import differentiate

        return differentiate(self)

    def diff_overflow(self, overflow_value: V) -> TimeSeries[V]:
        from tsalign.series.accumulation import diff_overflow

        return diff_overflow(self, overflow_value)

    def integrate(self) -> TimeSeries[V]:
        from tsalign.series.accumulation import integrate

        return integrate(self)

    def integrate_by_time(self, window: DurationLike) -> TimeSeries[V]:
        from tsalign.series.accumulation import integrate_by_time

        return integrate_by_time(self, window)

    def repeat(
        self,
        start: InstantLike,
        end: InstantLike,
        duration: DurationLike,
    ) -> TimeSeries[V]:
        from tsalign.series.accumulation import repeat

        return repeat(self, start, end, duration)

    def shift_time(self, duration: DurationLike, forward: bool = True) -> TimeSeries[V]:
        from tsalign.series.accumulation import shift_time

        return shift_time(self, duration, forward=forward)

    def mean(self) -> float:
        from tsalign.series.stats import mean

        return mean(self)

    def variance(self) -> float:
        from tsalign.series.stats import variance

        return variance(self)

    def stddev(self) -> float:
        from tsalign.series.stats import stddev

        return stddev(self)

    # ------------------------------------------------------------------
    # Interop
    # ------------------------------------------------------------------

    def to_pandas(self, name: str | None = None) -> pd.Series:
        """Convert to a ``pd.Series`` with a ``DatetimeIndex``."""
        return pd.Series(
            list(self.values),
            index=pd.DatetimeIndex(self.index, name="time"),
            name=name,
            dtype=None if self.values else "float64",
        )

    def to_json(self, name: str | None = None) -> str:
        """Serialize to a JSON ``SeriesPayload`` document."""
        from tsalign.contracts.payloads import to_payload

        return to_payload(self, name=name).model_dump_json()


def _infer_dtype(values: tuple[Any, ...]) -> type:
    if not values:
        return float
    return next(
        (type(v) for v in values if not isinstance(v, numbers.Integral)),
        type(values[0]),
    )
