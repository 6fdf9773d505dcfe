"""Shared type definitions for tsalign.

Type aliases used across modules for clarity and consistency.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import pandas as pd

# Element type of a series
V = TypeVar("V")

Instant = pd.Timestamp
Duration = pd.Timedelta

# Anything accepted by tsalign.time.to_instant / to_duration
InstantLike = Any
DurationLike = Any

# One (instant, value) observation
Sample = tuple[pd.Timestamp, Any]

# resample: (left sample, right sample, target instant) -> value
Combiner = Callable[[Sample, Sample, pd.Timestamp], Any]

# group_by_time / rolling_window
Reducer = Callable[[Sequence[Any]], Any]

# group_by_time key function
Bucketer = Callable[[pd.Timestamp], pd.Timestamp]

__all__ = [
    "V",
    "Instant",
    "Duration",
    "InstantLike",
    "DurationLike",
    "Sample",
    "Combiner",
    "Reducer",
    "Bucketer",
]
