"""fieldrules — decimal precision/scale and format rules for record fields."""

from fieldrules.domain.conditional import FieldAccessor, SiblingNotFoundError
from fieldrules.domain.decimals import DecimalValue, MalformedDecimalError, parse_decimal
from fieldrules.domain.params import (
    ConditionalRule,
    InvalidParameterError,
    PrecisionScale,
    parse_conditional_param,
    parse_decimal_params,
)
from fieldrules.domain.password import PasswordStrengthError, validate_password_strength
from fieldrules.domain.types import FailureKind, Verdict
from fieldrules.engine.records import as_field_string
from fieldrules.engine.registry import RuleRegistry, UnknownRuleError, build_registry
from fieldrules.engine.report import FieldError, ValidationReport
from fieldrules.engine.rules import Rule, RuleContext
from fieldrules.engine.validator import Validator

__version__ = "0.1.0"

__all__ = [
    "ConditionalRule",
    "DecimalValue",
    "FailureKind",
    "FieldAccessor",
    "FieldError",
    "InvalidParameterError",
    "MalformedDecimalError",
    "PasswordStrengthError",
    "PrecisionScale",
    "Rule",
    "RuleContext",
    "RuleRegistry",
    "SiblingNotFoundError",
    "UnknownRuleError",
    "ValidationReport",
    "Validator",
    "Verdict",
    "__version__",
    "as_field_string",
    "build_registry",
    "parse_conditional_param",
    "parse_decimal",
    "parse_decimal_params",
    "validate_password_strength",
]
