"""Rule tag parsing.

A tag is a comma-separated list of rule items, each ``name`` or
``name=param``.  The parameter is everything after the first ``=``, so
``decimal_if=2@Mode=credit`` keeps its inner ``=``.
"""

from __future__ import annotations

from typing import NamedTuple

from fieldrules.domain.params import InvalidParameterError


class RuleCall(NamedTuple):
    """One rule application parsed from a tag."""

    name: str
    param: str = ""

    def __str__(self) -> str:
        return f"{self.name}={self.param}" if self.param else self.name


def parse_tag(tag: str) -> list[RuleCall]:
    """Split *tag* into rule calls.

    Examples:
        >>> parse_tag("required,decimal=10:2")
        [RuleCall(name='required', param=''), RuleCall(name='decimal', param='10:2')]
        >>> parse_tag("decimal_if=2@Mode=credit")
        [RuleCall(name='decimal_if', param='2@Mode=credit')]

    Raises:
        InvalidParameterError: an item has a parameter but no rule name.
    """
    calls: list[RuleCall] = []
    for item in tag.split(","):
        item = item.strip()
        if not item:
            continue
        name, _, param = item.partition("=")
        name = name.strip()
        if not name:
            msg = f"Rule item without a name in tag {tag!r}"
            raise InvalidParameterError(msg)
        calls.append(RuleCall(name, param))
    return calls
