"""Failure taxonomy and the verdict every rule handler returns.

A Verdict is truthy iff the rule passed.  The failure kind is an additive
diagnostic: callers that only need pass/fail use ``bool(verdict)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FailureKind(StrEnum):
    """Why a rule application failed."""

    MALFORMED_VALUE = "malformed_value"
    MALFORMED_PARAMETER = "malformed_parameter"
    OUT_OF_LIMIT = "out_of_limit"
    SIBLING_NOT_FOUND = "sibling_not_found"
    REQUIRED = "required"
    HANDLER_ERROR = "handler_error"


@dataclass(frozen=True)
class Verdict:
    """Outcome of one rule application."""

    passed: bool
    kind: FailureKind | None = None
    detail: str = ""

    def __bool__(self) -> bool:
        return self.passed

    @classmethod
    def ok(cls) -> Verdict:
        return _PASSED

    @classmethod
    def fail(cls, kind: FailureKind, detail: str = "") -> Verdict:
        return cls(passed=False, kind=kind, detail=detail)


_PASSED = Verdict(passed=True)
