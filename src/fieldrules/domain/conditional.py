"""Conditional decimal validation gated on a sibling field.

``decimal_if=<rule>@<field>=<expected>`` applies ``decimal=<rule>`` to the
target only when the sibling named ``<field>`` currently reads exactly
``<expected>``.  When the condition is unmet the rule passes without
looking at the target at all, so an unparsable target is never flagged.

Sibling lookup is one level deep, by name, on the record that owns the
target field.  A missing sibling fails closed unless the caller asks for
``missing_sibling="raise"``.
"""

from __future__ import annotations

from typing import Literal, Protocol

from fieldrules.domain.params import (
    DEFAULT_LIMIT,
    InvalidParameterError,
    PrecisionScale,
    parse_conditional_param,
)
from fieldrules.domain.precision import check_decimal_rule
from fieldrules.domain.types import FailureKind, Verdict

MissingSiblingPolicy = Literal["fail", "raise"]


class FieldAccessor(Protocol):
    """Read access to a record's fields by name."""

    def field_value(self, name: str) -> str | None:
        """Return the field's current string value, or None if absent."""
        ...


class SiblingNotFoundError(LookupError):
    """Raised for a missing sibling when the policy is ``"raise"``."""


def check_decimal_if(
    value: object,
    param: str,
    siblings: FieldAccessor | None,
    *,
    default: PrecisionScale = DEFAULT_LIMIT,
    missing_sibling: MissingSiblingPolicy = "fail",
) -> Verdict:
    """Apply the decimal rule to *value* only if the sibling condition holds."""
    try:
        condition = parse_conditional_param(param)
    except InvalidParameterError as exc:
        return Verdict.fail(FailureKind.MALFORMED_PARAMETER, str(exc))

    current = siblings.field_value(condition.field) if siblings is not None else None
    if current is None:
        if missing_sibling == "raise":
            msg = f"Sibling field not found: {condition.field!r}"
            raise SiblingNotFoundError(msg)
        return Verdict.fail(
            FailureKind.SIBLING_NOT_FOUND, f"Sibling field not found: {condition.field!r}"
        )

    if current != condition.expected:
        return Verdict.ok()

    return check_decimal_rule(value, condition.rule, default=default)
