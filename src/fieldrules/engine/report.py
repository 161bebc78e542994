"""Validation outcome models.

INVARIANT: A report is ok iff it carries no errors.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from fieldrules.domain.types import FailureKind


class FieldError(BaseModel):
    """One failed rule application on one field.

    Attributes:
        field: Name of the field that failed.
        rule: Rule name from the tag (e.g. ``"decimal"``).
        param: Raw parameter text from the tag, ``""`` when absent.
        value: String reading of the offending value, None if unset.
        kind: Failure category reported by the rule handler.
        detail: Handler-provided diagnostic, may be empty.
        message: Human-readable English sentence.
    """

    model_config = {"frozen": True}

    field: str
    rule: str
    param: str = ""
    value: str | None = None
    kind: FailureKind | None = None
    detail: str = ""
    message: str


class ValidationReport(BaseModel):
    """Aggregated result of validating a record or a single value."""

    model_config = {"frozen": True}

    ok: bool
    errors: list[FieldError] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[FieldError]) -> ValidationReport:
        return cls(ok=not errors, errors=list(errors))

    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def summary(self) -> str:
        """All messages joined with ``"; "`` (empty string when ok)."""
        return "; ".join(self.messages())

    def for_field(self, field: str) -> list[FieldError]:
        return [e for e in self.errors if e.field == field]
