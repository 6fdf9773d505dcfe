"""Time utilities: instant/duration coercion, grid generation and bucketing."""

from __future__ import annotations

import numbers
from datetime import timedelta

import numpy as np
import pandas as pd

from tsalign.core.errors import EContractViolation
from tsalign.core.types import Bucketer, Duration, DurationLike, Instant, InstantLike


def to_instant(value: InstantLike) -> Instant:
    """Coerce ``value`` to a naive ``pd.Timestamp``.

    Numbers are read as epoch seconds. Timezone-aware values are converted
    to UTC before the zone is dropped, so every instant lives on one axis.
    """
    if isinstance(value, pd.Timestamp):
        ts = value
    elif isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_)):
        ts = pd.Timestamp(value, unit="s")
    else:
        ts = pd.Timestamp(value)

    if pd.isna(ts):
        raise ValueError(f"Cannot convert {value!r} to an instant")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def to_duration(value: DurationLike) -> Duration:
    """Coerce ``value`` to a ``pd.Timedelta``.

    Numbers are read as seconds; strings use pandas offset aliases
    (``"1s"``, ``"5min"``, ``"1D"``).
    """
    if isinstance(value, pd.Timedelta):
        delta = value
    elif isinstance(value, (timedelta, np.timedelta64, str)):
        delta = pd.Timedelta(value)
    elif isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_)):
        delta = pd.Timedelta(value, unit="s")
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to a duration")

    if pd.isna(delta):
        raise ValueError(f"Cannot convert {value!r} to a duration")
    return delta


def between(start: InstantLike, end: InstantLike) -> Duration:
    """Signed duration from ``start`` to ``end``."""
    return to_instant(end) - to_instant(start)


def instant_grid(
    start: InstantLike,
    end: InstantLike,
    step: DurationLike,
) -> tuple[Instant, ...]:
    """Regular grid ``start, start+step, ...`` up to and including ``end``.

    Arithmetic is done on integer nanoseconds, so an ``end`` that lies exactly
    on the grid is always part of it.

    Raises:
        EContractViolation: If ``step`` is not positive
    """
    step = to_duration(step)
    if step <= pd.Timedelta(0):
        raise EContractViolation(
            "Grid step must be positive",
            context={"step": str(step)},
        )

    start = to_instant(start)
    end = to_instant(end)
    if end < start:
        return ()
    return tuple(pd.date_range(start=start, end=end, freq=step))


def floor_to(freq: str) -> Bucketer:
    """Build a bucketing function truncating instants to ``freq``.

    Fixed frequencies (``"h"``, ``"15min"``) use ``Timestamp.floor``.
    Calendar offsets roll the day back onto the offset, so start-anchored
    aliases (``"D"``, ``"W-MON"``, ``"MS"``, ``"QS"``, ``"YS"``) give the
    start of the enclosing period.
    """
    offset = pd.tseries.frequencies.to_offset(freq)

    if isinstance(offset, pd.offsets.Tick):

        def bucket(ts: pd.Timestamp) -> pd.Timestamp:
            return ts.floor(offset)

    else:

        def bucket(ts: pd.Timestamp) -> pd.Timestamp:
            return offset.rollback(ts.normalize())

    return bucket


__all__ = [
    "to_instant",
    "to_duration",
    "between",
    "instant_grid",
    "floor_to",
]
