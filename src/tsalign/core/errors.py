"""Core error types with rich context.

The library prefers well-defined degenerate results (empty series, numeric
zero) over raising. The errors below cover the remaining cases: arguments
that cannot produce a result and tabular input that is corrupt.
"""

from __future__ import annotations

from typing import Any


class TSAlignError(Exception):
    """Base exception with rich context.

    Subclasses only override ``error_code`` and ``fix_hint``.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class EContractViolation(TSAlignError):
    """Arguments violate an operation's contract."""

    error_code = "E_CONTRACT_VIOLATION"
    fix_hint = "Check step/window durations are positive and the value type fits the operation"


class ECodecParse(TSAlignError):
    """Tabular input could not be parsed."""

    error_code = "E_CODEC_PARSE"
    fix_hint = "Expected a header 'time,<col>...' followed by rows of timestamp and numeric fields"


ERROR_REGISTRY: dict[str, type[TSAlignError]] = {
    "E_CONTRACT_VIOLATION": EContractViolation,
    "E_CODEC_PARSE": ECodecParse,
}


def get_error_class(error_code: str) -> type[TSAlignError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, TSAlignError)
