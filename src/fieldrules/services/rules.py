"""RuleService — check values and records, list the available rules.

Validation failures are reported as ``ok=False`` results with code
``VALIDATION_FAILED`` and one entry per failing field in
``error.detail["errors"]``.  Authoring mistakes (unknown rule, malformed
tag, missing sibling under the ``raise`` policy) get their own codes.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from pathlib import Path
from typing import Any

from fieldrules.domain.conditional import SiblingNotFoundError
from fieldrules.domain.params import InvalidParameterError
from fieldrules.engine.records import RecordView
from fieldrules.engine.registry import UnknownRuleError
from fieldrules.engine.report import ValidationReport
from fieldrules.engine.validator import Validator
from fieldrules.services.result import ErrorCode, ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class RuleService:
    """Service-layer facade over a :class:`Validator`."""

    def __init__(self, validator: Validator) -> None:
        self._validator = validator

    @property
    def validator(self) -> Validator:
        return self._validator

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check_value(
        self,
        value: Any,
        tag: str,
        *,
        siblings: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Validate a single value against a rule tag."""
        op = "check_value"
        try:
            report = self._validator.validate_value(value, tag, siblings=siblings)
        except (UnknownRuleError, InvalidParameterError, SiblingNotFoundError) as exc:
            return _authoring_error(op, exc, tag=tag)

        if not report.ok:
            return _validation_failed(op, report)
        return ServiceResult(
            ok=True,
            op=op,
            data={"valid": True, "value": value, "tag": tag},
            meta=self._meta(),
        )

    def validate_record(
        self,
        record: Any,
        rules: Mapping[str, str] | None = None,
    ) -> ServiceResult:
        """Validate every tagged field of *record*."""
        op = "validate_record"
        try:
            report = self._validator.validate(record, rules)
        except (UnknownRuleError, InvalidParameterError, SiblingNotFoundError) as exc:
            return _authoring_error(op, exc)
        except TypeError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=ErrorCode.INVALID_RECORD, message=str(exc)),
            )

        if not report.ok:
            return _validation_failed(op, report)

        view = RecordView(record)
        tags = rules if rules is not None else view.declared_rules()
        warnings = [
            f"Field {name!r} is not in the record; validated as unset"
            for name in tags
            if not view.has(name)
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"valid": True, "fields": len(tags)},
            warnings=warnings,
            meta=self._meta(),
        )

    def validate_files(self, record_path: Path, rules_path: Path) -> ServiceResult:
        """Validate a JSON record file against a JSON ``{field: tag}`` file."""
        op = "validate_record"
        record = _load_json_object(record_path)
        if isinstance(record, ServiceResult):
            return record
        rules = _load_json_object(rules_path)
        if isinstance(rules, ServiceResult):
            return rules

        bad = [k for k, v in rules.items() if not isinstance(v, str)]
        if bad:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=ErrorCode.INVALID_RULES,
                    message=f"Rule tags must be strings: {', '.join(sorted(bad))}",
                    detail={"path": str(rules_path)},
                ),
            )
        return self.validate_record(record, rules)

    def list_rules(self) -> ServiceResult:
        """List every rule in the registry with its origin."""
        registry = self._validator.registry
        items = [
            {
                "name": name,
                "description": registry[name].description,
                "source": registry[name].source,
            }
            for name in registry.names()
        ]
        return ServiceResult(
            ok=True,
            op="list_rules",
            data={"items": items, "count": len(items)},
        )

    def _meta(self) -> dict[str, Any] | None:
        config_path = self._validator.settings.config_path
        return {"config_path": str(config_path)} if config_path is not None else None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validation_failed(op: str, report: ValidationReport) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=ErrorCode.VALIDATION_FAILED,
            message=report.summary(),
            detail={"errors": [e.model_dump(mode="json") for e in report.errors]},
        ),
    )


def _authoring_error(op: str, exc: Exception, **detail: Any) -> ServiceResult:
    if isinstance(exc, UnknownRuleError):
        code = ErrorCode.UNKNOWN_RULE
        detail["rule"] = exc.name
    elif isinstance(exc, SiblingNotFoundError):
        code = ErrorCode.SIBLING_NOT_FOUND
    else:
        code = ErrorCode.INVALID_TAG
    logger.warning("%s: %s", code, exc)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=str(exc), detail=detail),
    )


def _load_json_object(path: Path) -> dict[str, Any] | ServiceResult:
    # JSON numbers become Decimal so 100.50 keeps its written scale.
    try:
        payload = json.loads(
            path.read_text(encoding="utf-8"), parse_float=Decimal, parse_int=Decimal
        )
    except (OSError, json.JSONDecodeError) as exc:
        return ServiceResult(
            ok=False,
            op="validate_record",
            error=ServiceError(
                code=ErrorCode.INVALID_JSON,
                message=f"Cannot read {path}: {exc}",
                detail={"path": str(path)},
            ),
        )
    if not isinstance(payload, dict):
        return ServiceResult(
            ok=False,
            op="validate_record",
            error=ServiceError(
                code=ErrorCode.INVALID_JSON,
                message=f"Expected a JSON object in {path}",
                detail={"path": str(path)},
            ),
        )
    return payload
