"""Record access — field values, sibling lookup, and declared rules.

A record is anything with named fields: a mapping, a dataclass instance,
a pydantic model, or a plain object with instance attributes.
:class:`RecordView` gives all of them the same narrow read interface and
satisfies :class:`fieldrules.domain.conditional.FieldAccessor`.

Rules may be declared on the record type itself:

- dataclasses: ``field(metadata={"validate": "decimal=2"})``
- pydantic: ``Field(json_schema_extra={"validate": "decimal=2"})``
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from fieldrules.domain.decimals import render_decimal

RULE_METADATA_KEY = "validate"


def as_field_string(value: Any) -> Any:
    """Present structured decimals to rules as their canonical string.

    Anything that is not a :class:`~decimal.Decimal` passes through unchanged.
    """
    if isinstance(value, Decimal):
        return render_decimal(value)
    return value


def to_field_string(value: Any) -> str:
    """Current string reading of a field, as compared by conditional rules.

    ``None`` reads as the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Decimal):
        return render_decimal(value)
    return str(value)


def is_empty(value: Any) -> bool:
    """Whether *value* is unset for ``required`` / ``omitempty`` purposes."""
    return value is None or value == ""


class RecordView:
    """Uniform, read-only access to a record's named fields."""

    def __init__(self, record: Any) -> None:
        self._record = record
        self._values = _collect_values(record)

    @property
    def record(self) -> Any:
        return self._record

    def names(self) -> list[str]:
        return list(self._values)

    def has(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str) -> Any:
        """Raw field value, or None if the record has no such field."""
        return self._values.get(name)

    def field_value(self, name: str) -> str | None:
        """String reading of *name*, or None when the field does not exist."""
        if name not in self._values:
            return None
        return to_field_string(self._values[name])

    def declared_rules(self) -> dict[str, str]:
        """Rule tags declared on the record's type, keyed by field name."""
        return _collect_declared_rules(self._record)


def _collect_values(record: Any) -> dict[str, Any]:
    if isinstance(record, Mapping):
        return {str(k): v for k, v in record.items()}
    if isinstance(record, BaseModel):
        return {name: getattr(record, name) for name in type(record).model_fields}
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
    try:
        attrs = vars(record)
    except TypeError as exc:
        msg = f"Cannot read fields from {type(record).__name__}"
        raise TypeError(msg) from exc
    return {k: v for k, v in attrs.items() if not k.startswith("_")}


def _collect_declared_rules(record: Any) -> dict[str, str]:
    rules: dict[str, str] = {}
    if isinstance(record, BaseModel):
        for name, info in type(record).model_fields.items():
            extra = info.json_schema_extra
            if isinstance(extra, dict) and isinstance(extra.get(RULE_METADATA_KEY), str):
                rules[name] = extra[RULE_METADATA_KEY]
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        for f in dataclasses.fields(record):
            tag = f.metadata.get(RULE_METADATA_KEY)
            if isinstance(tag, str):
                rules[f.name] = tag
    return rules
