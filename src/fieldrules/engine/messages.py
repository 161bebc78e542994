"""English failure messages, one sentence per failed rule application."""

from __future__ import annotations

from fieldrules.domain.params import (
    DEFAULT_LIMIT,
    InvalidParameterError,
    PrecisionScale,
    parse_conditional_param,
    parse_decimal_params,
)
from fieldrules.domain.password import DEFAULT_POLICY, PasswordPolicy

_SIMPLE_TEMPLATES: dict[str, str] = {
    "dgt": "{field} must be greater than {param}",
    "dgte": "{field} must be greater than or equal to {param}",
    "dlt": "{field} must be less than {param}",
    "dlte": "{field} must be less than or equal to {param}",
    "deq": "{field} must be equal to {param}",
    "dneq": "{field} must not be equal to {param}",
    "https_url": "{field} must be a valid HTTPS URL",
    "mobile_e164": "{field} must be a valid mobile number in E.164 format (e.g., +66812345678)",
    "required": "{field} is a required field",
}

_INTEGER_FORMAT = "{field} must be an integer format (no decimal places)"
_DECIMAL_FORMAT = "{field} must be a decimal with precision ≤ {precision} and scale ≤ {scale}"


def _decimal_message(field: str, param: str, default_limit: PrecisionScale) -> str:
    if not param:
        return _DECIMAL_FORMAT.format(
            field=field, precision=default_limit.precision, scale=default_limit.scale
        )
    limit = parse_decimal_params(param, default=default_limit)
    if limit.scale == 0:
        return _INTEGER_FORMAT.format(field=field)
    return _DECIMAL_FORMAT.format(field=field, precision=limit.precision, scale=limit.scale)


def _decimal_if_message(field: str, param: str, default_limit: PrecisionScale) -> str:
    fallback = f"{field} conditional decimal validation failed"
    if not param:
        return fallback
    try:
        condition = parse_conditional_param(param)
    except InvalidParameterError:
        return fallback

    when = f"when {condition.field} equals '{condition.expected}'"
    limit = parse_decimal_params(condition.rule, default=default_limit)
    if limit.scale == 0:
        return f"{_INTEGER_FORMAT.format(field=field)} {when}"
    if not condition.rule:
        return f"{field} must be a decimal with default precision and scale {when}"
    return f"{_DECIMAL_FORMAT.format(field=field, precision=limit.precision, scale=limit.scale)} {when}"


def _password_message(field: str, policy: PasswordPolicy) -> str:
    return (
        f"{field} must contain at least {policy.min_length} characters with: "
        "uppercase letter (A-Z), lowercase letter (a-z), digit (0-9), "
        f"and special character ({policy.special_chars})"
    )


def render_message(
    field: str,
    rule: str,
    param: str = "",
    *,
    default_limit: PrecisionScale = DEFAULT_LIMIT,
    policy: PasswordPolicy = DEFAULT_POLICY,
) -> str:
    """Render the English sentence for *field* failing *rule* with *param*.

    Rules without a dedicated sentence (typically plugin rules) get a
    generic one naming the rule.
    """
    if rule == "decimal":
        return _decimal_message(field, param, default_limit)
    if rule == "decimal_if":
        return _decimal_if_message(field, param, default_limit)
    if rule == "password_strength":
        return _password_message(field, policy)
    template = _SIMPLE_TEMPLATES.get(rule)
    if template is not None:
        return template.format(field=field, param=param)
    return f"{field} failed on the '{rule}' rule"
