"""Precision/scale validation by digit counting.

Precision is not a literal "total digits" count.  It is the budget from
which ``scale`` fractional slots are reserved first; whatever remains is
the room for integer digits.  ``10:2`` therefore allows at most 8 integer
digits and at most 2 fractional digits, whether or not the value uses
its fractional slots.
"""

from __future__ import annotations

from fieldrules.domain.decimals import DecimalValue, try_parse_decimal
from fieldrules.domain.params import DEFAULT_LIMIT, PrecisionScale, parse_decimal_params
from fieldrules.domain.types import FailureKind, Verdict


def check_precision_scale(value: DecimalValue, limit: PrecisionScale) -> Verdict:
    """Decide whether *value* fits within *limit*, with a reason on failure.

    The sign never counts toward either budget and leading integer zeros
    are ignored (``"000.5"`` has one integer digit).
    """
    fractional_digits = len(value.fractional_part)
    if fractional_digits > limit.scale:
        return Verdict.fail(
            FailureKind.OUT_OF_LIMIT,
            f"{fractional_digits} fractional digits exceed scale {limit.scale}",
        )

    integer_digits = len(value.integer_part)
    if integer_digits > limit.max_integer_digits:
        return Verdict.fail(
            FailureKind.OUT_OF_LIMIT,
            f"{integer_digits} integer digits exceed {limit.max_integer_digits} "
            f"(precision {limit.precision} - scale {limit.scale})",
        )
    return Verdict.ok()


def fits_precision_scale(value: DecimalValue, limit: PrecisionScale) -> bool:
    """Boolean form of :func:`check_precision_scale`."""
    return check_precision_scale(value, limit).passed


def check_decimal_rule(
    value: object,
    param: str,
    *,
    default: PrecisionScale = DEFAULT_LIMIT,
) -> Verdict:
    """The ``decimal`` rule: parse *value*, derive limits from *param*, check."""
    parsed = try_parse_decimal(value)
    if parsed is None:
        return Verdict.fail(FailureKind.MALFORMED_VALUE, f"Not a decimal: {value!r}")
    return check_precision_scale(parsed, parse_decimal_params(param, default=default))
