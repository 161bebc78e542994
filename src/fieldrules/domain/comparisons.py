"""Relational comparison rules over exact decimal values.

Both sides are parsed independently on every call.  If either side is
not a decimal literal the rule fails closed; the verdict records which
side was at fault.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from decimal import Decimal

from fieldrules.domain.decimals import try_parse_decimal
from fieldrules.domain.types import FailureKind, Verdict

Comparator = Callable[[Decimal, Decimal], bool]

COMPARATORS: dict[str, Comparator] = {
    "dgt": operator.gt,
    "dgte": operator.ge,
    "dlt": operator.lt,
    "dlte": operator.le,
    "deq": operator.eq,
    "dneq": operator.ne,
}

SYMBOLS: dict[str, str] = {
    "dgt": ">",
    "dgte": ">=",
    "dlt": "<",
    "dlte": "<=",
    "deq": "==",
    "dneq": "!=",
}


def compare_decimal_strings(value: object, operand: str, comparator: Comparator) -> Verdict:
    """Parse *value* and *operand* as decimals and apply *comparator*."""
    left = try_parse_decimal(value)
    if left is None:
        return Verdict.fail(FailureKind.MALFORMED_VALUE, f"Not a decimal: {value!r}")

    right = try_parse_decimal(operand)
    if right is None:
        return Verdict.fail(
            FailureKind.MALFORMED_PARAMETER, f"Comparison operand is not a decimal: {operand!r}"
        )

    if comparator(left.value, right.value):
        return Verdict.ok()
    return Verdict.fail(FailureKind.OUT_OF_LIMIT, f"{left} vs {right}")
