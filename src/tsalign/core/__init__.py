"""Core module - errors, configuration and shared types."""

from tsalign.core.config import CsvConfig
from tsalign.core.errors import (
    ECodecParse,
    EContractViolation,
    TSAlignError,
)

__all__ = [
    # Config
    "CsvConfig",
    # Errors
    "TSAlignError",
    "EContractViolation",
    "ECodecParse",
]
