"""Built-in rule handlers and the rule contract.

A rule handler receives a :class:`RuleContext` and returns a
:class:`~fieldrules.domain.types.Verdict` (plugins may return a plain
bool).  Handlers never raise for malformed input; every failure
collapses to a falsy verdict with a :class:`FailureKind`.

Handlers that depend on configuration are built by
:func:`build_builtin_rules` with the relevant settings bound in.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fieldrules.domain.comparisons import COMPARATORS, SYMBOLS, compare_decimal_strings
from fieldrules.domain.conditional import FieldAccessor, check_decimal_if
from fieldrules.domain.password import is_strong_password
from fieldrules.domain.phone import is_mobile_e164
from fieldrules.domain.precision import check_decimal_rule
from fieldrules.domain.types import FailureKind, Verdict
from fieldrules.domain.urls import is_https_url
from fieldrules.engine.records import is_empty

if TYPE_CHECKING:
    from fieldrules.config.settings import FieldRulesSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule handler may look at for one application."""

    field: str
    value: Any
    param: str = ""
    siblings: FieldAccessor | None = None


RuleHandler = Callable[[RuleContext], "Verdict | bool"]


@dataclass(frozen=True)
class Rule:
    """A named rule in the registry."""

    name: str
    handler: RuleHandler
    description: str = ""
    source: str = "builtin"

    def apply(self, ctx: RuleContext) -> Verdict:
        """Run the handler and normalize a bare bool into a Verdict.

        A plugin or extra handler that raises fails the field with
        ``HANDLER_ERROR`` and logs a warning.  Built-in handlers propagate.
        """
        if self.source == "builtin":
            result = self.handler(ctx)
        else:
            try:
                result = self.handler(ctx)
            except Exception as exc:
                logger.warning(
                    "Rule %r from %s raised on field %s",
                    self.name,
                    self.source,
                    ctx.field,
                    exc_info=True,
                )
                return Verdict.fail(FailureKind.HANDLER_ERROR, f"{type(exc).__name__}: {exc}")
        if isinstance(result, Verdict):
            return result
        if result:
            return Verdict.ok()
        return Verdict.fail(FailureKind.OUT_OF_LIMIT)


def _format_check(predicate: Callable[[Any], bool], what: str) -> RuleHandler:
    def handler(ctx: RuleContext) -> Verdict:
        if predicate(ctx.value):
            return Verdict.ok()
        return Verdict.fail(FailureKind.OUT_OF_LIMIT, f"Not {what}: {ctx.value!r}")

    return handler


def _comparison(name: str) -> RuleHandler:
    comparator = COMPARATORS[name]

    def handler(ctx: RuleContext) -> Verdict:
        return compare_decimal_strings(ctx.value, ctx.param, comparator)

    return handler


def check_required(ctx: RuleContext) -> Verdict:
    if is_empty(ctx.value):
        return Verdict.fail(FailureKind.REQUIRED, "Value is empty")
    return Verdict.ok()


def check_mobile_e164(ctx: RuleContext) -> Verdict:
    if is_mobile_e164(ctx.value, ctx.param):
        return Verdict.ok()
    return Verdict.fail(FailureKind.OUT_OF_LIMIT, f"Not an E.164 mobile number: {ctx.value!r}")


def build_builtin_rules(settings: FieldRulesSettings | None = None) -> dict[str, Rule]:
    """Construct the built-in rule set with *settings* bound in."""
    if settings is None:
        from fieldrules.config.settings import FieldRulesSettings

        settings = FieldRulesSettings.from_cli()

    default_limit = settings.decimal.default_limit
    missing_sibling = settings.conditional.missing_sibling
    policy = settings.password.to_policy()

    def check_decimal(ctx: RuleContext) -> Verdict:
        return check_decimal_rule(ctx.value, ctx.param, default=default_limit)

    def check_conditional(ctx: RuleContext) -> Verdict:
        return check_decimal_if(
            ctx.value,
            ctx.param,
            ctx.siblings,
            default=default_limit,
            missing_sibling=missing_sibling,
        )

    rules: dict[str, Rule] = {
        "required": Rule("required", check_required, "Value must not be empty"),
        "decimal": Rule(
            "decimal",
            check_decimal,
            "Decimal string within precision:scale (default "
            f"{default_limit.precision}:{default_limit.scale})",
        ),
        "decimal_if": Rule(
            "decimal_if",
            check_conditional,
            "Decimal rule applied only when a sibling field equals a value",
        ),
        "https_url": Rule(
            "https_url", _format_check(is_https_url, "an HTTPS URL"), "HTTPS URL with a host"
        ),
        "mobile_e164": Rule(
            "mobile_e164", check_mobile_e164, "Mobile number in E.164 format, optional region"
        ),
        "password_strength": Rule(
            "password_strength",
            _format_check(lambda v: is_strong_password(v, policy), "a strong password"),
            f"Password of {policy.min_length}-{policy.max_length} characters with mixed classes",
        ),
    }
    for name in COMPARATORS:
        rules[name] = Rule(
            name, _comparison(name), f"Decimal string {SYMBOLS[name]} the parameter"
        )
    return rules
