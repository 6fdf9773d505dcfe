"""Configuration for the tabular codec."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CsvConfig:
    """Layout of the delimited text format.

    Args:
        time_col: Header name of the timestamp column
        value_col: Header name used when writing a single series
        delimiter: Single-character field separator
        time_format: ``strftime`` format for reading timestamps. ``None``
            accepts the ISO 8601 family (``2005-01-01T12:34:15``,
            ``2013-09-09 10:50:00``, ``2005-01-01``).
        date_format: ``strftime`` format for writing timestamps. ``None``
            writes ISO 8601 at full precision, so sub-second instants
            survive a write/read cycle.
        sparse_write: Leave absent values blank when writing several series
            instead of filling them with ``fill_value``
        fill_value: Value written for absent samples in a dense write
    """

    time_col: str = "time"
    value_col: str = "value"
    delimiter: str = ","
    time_format: str | None = None
    date_format: str | None = None
    sparse_write: bool = False
    fill_value: float = 0.0

    def __post_init__(self) -> None:
        if not self.time_col:
            raise ValueError("time_col must be a non-empty string")
        if not self.value_col:
            raise ValueError("value_col must be a non-empty string")
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")

    @classmethod
    def dense(cls) -> CsvConfig:
        """Dense preset: absent values are written as zero."""
        return cls(sparse_write=False)

    @classmethod
    def sparse(cls) -> CsvConfig:
        """Sparse preset: absent values are written as blank fields."""
        return cls(sparse_write=True)
