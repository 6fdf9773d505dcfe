"""Pydantic payload models for serialized series.

These models define the JSON boundary while the runtime keeps using the
immutable ``TimeSeries`` container. Timestamps travel as epoch nanoseconds
so a round trip is lossless.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from tsalign.series.timeseries import TimeSeries

SERIES_PAYLOAD_SCHEMA_VERSION = 1


class _PayloadModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class SeriesPayload(_PayloadModel):
    """Serializable payload for a single series."""

    schema_version: int = Field(SERIES_PAYLOAD_SCHEMA_VERSION, ge=1)
    name: str | None = None
    timestamps_ns: list[int] = Field(default_factory=list)
    values: list[int | float] = Field(default_factory=list)


def to_payload(series: TimeSeries, name: str | None = None) -> SeriesPayload:
    return SeriesPayload(
        name=name,
        timestamps_ns=[t.value for t in series.index],
        values=[v.item() if isinstance(v, np.generic) else v for v in series.values],
    )


def from_payload(payload: SeriesPayload | dict[str, Any]) -> TimeSeries:
    """Build a series from a payload or its dict form.

    Mismatched lengths are truncated like any other construction.

    Raises:
        pydantic.ValidationError: If a dict payload does not match the schema
    """
    if not isinstance(payload, SeriesPayload):
        payload = SeriesPayload.model_validate(payload)
    return TimeSeries(
        tuple(pd.Timestamp(ns, unit="ns") for ns in payload.timestamps_ns),
        tuple(payload.values),
    )
