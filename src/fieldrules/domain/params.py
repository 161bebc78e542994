"""Rule parameter parsing — precision/scale limits and conditional rules.

Two grammars:

- Decimal limits: ``""`` | ``"<scale>"`` | ``"<precision>:<scale>"``.
  Parsing never fails; every unparsable part keeps its default.
- Conditional rule: ``"<rule>@<field>=<expected>"`` with exactly one
  ``@`` and exactly one ``=`` after it.  Anything else is a hard error.

Both are re-parsed on every rule call; nothing here is cached.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple

DEFAULT_PRECISION = 38
DEFAULT_SCALE = 18

# Same range as a signed 32-bit integer; larger values keep the default.
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidParameterError(ValueError):
    """Raised when a rule's static parameter text does not match its grammar."""


class PrecisionScale(NamedTuple):
    """Maximum significant digits and maximum fractional digits."""

    precision: int
    scale: int

    @property
    def max_integer_digits(self) -> int:
        return self.precision - self.scale


DEFAULT_LIMIT = PrecisionScale(DEFAULT_PRECISION, DEFAULT_SCALE)


@dataclass(frozen=True)
class ConditionalRule:
    """A decimal rule gated on a sibling field's value."""

    rule: str
    field: str
    expected: str


def _parse_int(text: str) -> int | None:
    """Parse a base-10 integer strictly; None on any deviation."""
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return None
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def parse_decimal_params(
    param: str,
    *,
    default: PrecisionScale = DEFAULT_LIMIT,
) -> PrecisionScale:
    """Turn a compact parameter into a (precision, scale) pair.

    Examples:
        >>> parse_decimal_params("")
        PrecisionScale(precision=38, scale=18)
        >>> parse_decimal_params("2")
        PrecisionScale(precision=38, scale=2)
        >>> parse_decimal_params("10:abc")
        PrecisionScale(precision=10, scale=18)
    """
    precision, scale = default
    if param == "":
        return PrecisionScale(precision, scale)

    if ":" in param:
        parts = param.split(":")
        if len(parts) == 2:
            parsed_precision = _parse_int(parts[0])
            if parsed_precision is not None:
                precision = parsed_precision
            parsed_scale = _parse_int(parts[1])
            if parsed_scale is not None:
                scale = parsed_scale
    else:
        parsed_scale = _parse_int(param)
        if parsed_scale is not None:
            scale = parsed_scale

    return PrecisionScale(precision, scale)


def parse_conditional_param(param: str) -> ConditionalRule:
    """Split ``"<rule>@<field>=<expected>"`` into its three parts.

    Empty parts are allowed; the separator counts are not negotiable.

    Raises:
        InvalidParameterError: not exactly one ``@``, or not exactly one
            ``=`` after it.
    """
    parts = param.split("@")
    if len(parts) != 2:
        msg = f"Conditional parameter needs exactly one '@': {param!r}"
        raise InvalidParameterError(msg)

    condition = parts[1].split("=")
    if len(condition) != 2:
        msg = f"Conditional parameter needs exactly one '=' after '@': {param!r}"
        raise InvalidParameterError(msg)

    return ConditionalRule(rule=parts[0], field=condition[0], expected=condition[1])
