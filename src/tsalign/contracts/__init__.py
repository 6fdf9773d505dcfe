"""Serialization contracts for tsalign."""

from .payloads import SERIES_PAYLOAD_SCHEMA_VERSION, SeriesPayload, from_payload, to_payload

__all__ = [
    "SERIES_PAYLOAD_SCHEMA_VERSION",
    "SeriesPayload",
    "to_payload",
    "from_payload",
]
