"""Record and value validation against rule tags.

Every tag is parsed and every rule name resolved before any rule runs,
so an authoring mistake surfaces as :class:`UnknownRuleError` rather than
as a partial report.  Within a field, rules run left to right and the
first failure stops that field; failures across fields are aggregated.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fieldrules.domain.types import FailureKind
from fieldrules.engine.messages import render_message
from fieldrules.engine.records import RecordView, as_field_string, is_empty, to_field_string
from fieldrules.engine.registry import HOST_DIRECTIVES, RuleRegistry, build_registry
from fieldrules.engine.report import FieldError, ValidationReport
from fieldrules.engine.rules import Rule, RuleContext
from fieldrules.engine.tags import RuleCall, parse_tag

if TYPE_CHECKING:
    from fieldrules.config.settings import FieldRulesSettings
    from fieldrules.domain.conditional import FieldAccessor

logger = logging.getLogger(__name__)

# A resolved rule call; rule is None for host directives like omitempty.
_Step = tuple[RuleCall, Rule | None]


class Validator:
    """Apply rule tags to records or single values.

    Args:
        registry: Rules to resolve tag names against.  Built from
            *settings* when omitted.
        settings: Source of message defaults and, when no registry is
            given, of the built-in rule configuration.  When omitted it is
            loaded the way the CLI loads it, from ``FIELDRULES_*`` and the
            nearest ``fieldrules.toml``.
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        *,
        settings: FieldRulesSettings | None = None,
    ) -> None:
        if settings is None:
            from fieldrules.config.settings import FieldRulesSettings

            settings = FieldRulesSettings.from_cli()
        self._settings = settings
        self._registry = registry if registry is not None else build_registry(settings)
        self._policy = settings.password.to_policy()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def settings(self) -> FieldRulesSettings:
        return self._settings

    def validate(self, record: Any, rules: Mapping[str, str] | None = None) -> ValidationReport:
        """Validate every field of *record* that has a rule tag.

        Tags come from *rules* when given, otherwise from the rules
        declared on the record's type.  Fields named in *rules* but absent
        from the record are validated as unset.
        """
        view = RecordView(record)
        tags = dict(rules) if rules is not None else view.declared_rules()
        plans = {field: self._plan(tag) for field, tag in tags.items()}

        errors: list[FieldError] = []
        for field, steps in plans.items():
            error = self._run_field(field, view.get(field), steps, view)
            if error is not None:
                errors.append(error)
        return ValidationReport.from_errors(errors)

    def validate_value(
        self,
        value: Any,
        tag: str,
        *,
        siblings: FieldAccessor | Mapping[str, Any] | None = None,
        field: str = "value",
    ) -> ValidationReport:
        """Validate a single *value* against *tag*.

        *siblings* supplies the fields conditional rules look at; a plain
        mapping is accepted as well as any :class:`FieldAccessor`.
        """
        steps = self._plan(tag)
        accessor = _as_accessor(siblings)
        error = self._run_field(field, value, steps, accessor)
        return ValidationReport.from_errors([error] if error is not None else [])

    def check(
        self,
        value: Any,
        tag: str,
        *,
        siblings: FieldAccessor | Mapping[str, Any] | None = None,
    ) -> bool:
        return self.validate_value(value, tag, siblings=siblings).ok

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _plan(self, tag: str) -> list[_Step]:
        steps: list[_Step] = []
        for call in parse_tag(tag):
            if call.name in HOST_DIRECTIVES:
                steps.append((call, None))
            else:
                steps.append((call, self._registry.resolve(call.name)))
        return steps

    def _run_field(
        self,
        field: str,
        raw: Any,
        steps: list[_Step],
        siblings: FieldAccessor | None,
    ) -> FieldError | None:
        value = as_field_string(raw)
        for call, rule in steps:
            if rule is None:
                if is_empty(value):
                    return None
                continue

            verdict = rule.apply(RuleContext(field, value, call.param, siblings))
            if verdict:
                continue

            if verdict.kind is FailureKind.MALFORMED_PARAMETER:
                logger.warning(
                    "Malformed parameter for rule %s on field %s: %s",
                    call,
                    field,
                    verdict.detail,
                )
            logger.debug("Rule %s failed on field %s (%s)", call, field, verdict.kind)
            return FieldError(
                field=field,
                rule=call.name,
                param=call.param,
                value=None if raw is None else to_field_string(raw),
                kind=verdict.kind,
                detail=verdict.detail,
                message=render_message(
                    field,
                    call.name,
                    call.param,
                    default_limit=self._settings.decimal.default_limit,
                    policy=self._policy,
                ),
            )
        return None


def _as_accessor(siblings: FieldAccessor | Mapping[str, Any] | None) -> FieldAccessor | None:
    if siblings is None or hasattr(siblings, "field_value"):
        return siblings  # type: ignore[return-value]
    return RecordView(siblings)
