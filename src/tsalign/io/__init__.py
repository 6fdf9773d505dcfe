"""Tabular text codec for tsalign."""

from .tabular import from_csv, to_csv, to_csv_many

__all__ = [
    "from_csv",
    "to_csv",
    "to_csv_many",
]
