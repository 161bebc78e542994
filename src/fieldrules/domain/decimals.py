"""Decimal value parsing and canonical rendering.

Grammar: optional leading ``-``, one or more ASCII digits, optionally a
``.`` followed by one or more ASCII digits.  Nothing else is accepted —
no ``+``, no exponent, no whitespace, no ``.5`` or ``5.``.

The canonical string keeps fractional digits exactly as written, so
``"100.500"`` still carries three fractional digits when the
precision/scale validator counts them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

_DECIMAL_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


class MalformedDecimalError(ValueError):
    """Raised when a string is not a plain decimal literal."""


@dataclass(frozen=True)
class DecimalValue:
    """A parsed arbitrary-precision decimal and its canonical string."""

    value: Decimal
    text: str

    @property
    def is_negative(self) -> bool:
        return self.text.startswith("-")

    @property
    def integer_part(self) -> str:
        """Integer digits with the sign removed and leading zeros stripped."""
        digits = self.text.lstrip("-").partition(".")[0].lstrip("0")
        return digits or "0"

    @property
    def fractional_part(self) -> str:
        """Fractional digits as written (empty when there is no ``.``)."""
        return self.text.lstrip("-").partition(".")[2]

    def __str__(self) -> str:
        return self.text


def parse_decimal(text: str) -> DecimalValue:
    """Parse *text* into a :class:`DecimalValue`.

    Raises:
        MalformedDecimalError: *text* is not a string or does not match
            the plain decimal grammar.
    """
    if not isinstance(text, str) or _DECIMAL_PATTERN.fullmatch(text) is None:
        msg = f"Not a decimal literal: {text!r}"
        raise MalformedDecimalError(msg)
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        msg = f"Not a decimal literal: {text!r}"
        raise MalformedDecimalError(msg) from exc
    return DecimalValue(value=value, text=render_decimal(value))


def try_parse_decimal(text: object) -> DecimalValue | None:
    """Like :func:`parse_decimal` but returns None instead of raising."""
    if not isinstance(text, str):
        return None
    try:
        return parse_decimal(text)
    except MalformedDecimalError:
        return None


def render_decimal(value: Decimal) -> str:
    """Render *value* in plain positional notation, never scientific.

    Examples:
        >>> render_decimal(Decimal("100.500"))
        '100.500'
        >>> render_decimal(Decimal("1E-7"))
        '0.0000001'
    """
    return format(value, "f")
