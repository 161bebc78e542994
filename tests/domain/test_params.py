"""Tests for rule parameter parsing."""

from __future__ import annotations

import pytest

from fieldrules.domain.params import (
    DEFAULT_LIMIT,
    ConditionalRule,
    InvalidParameterError,
    PrecisionScale,
    parse_conditional_param,
    parse_decimal_params,
)


class TestParseDecimalParams:
    @pytest.mark.parametrize(
        ("param", "expected"),
        [
            ("", (38, 18)),
            ("2", (38, 2)),
            ("0", (38, 0)),
            ("10:6", (10, 6)),
            ("10:0", (10, 0)),
            ("abc:def", (38, 18)),
            ("10:abc", (10, 18)),
            ("abc:6", (38, 6)),
            ("invalid", (38, 18)),
            ("1:2:3", (38, 18)),
            (":", (38, 18)),
            ("10:", (10, 18)),
            ("99999999999", (38, 18)),
            ("+5", (38, 5)),
        ],
    )
    def test_table(self, param: str, expected: tuple[int, int]) -> None:
        assert parse_decimal_params(param) == PrecisionScale(*expected)

    def test_never_raises(self) -> None:
        for junk in ["@", "=", "2@Mode=x", "1.5", " 2", "２"]:
            parse_decimal_params(junk)

    def test_custom_defaults(self) -> None:
        assert parse_decimal_params("", default=PrecisionScale(20, 4)) == (20, 4)
        assert parse_decimal_params("abc:3", default=PrecisionScale(20, 4)) == (20, 3)

    def test_max_integer_digits(self) -> None:
        assert PrecisionScale(10, 2).max_integer_digits == 8
        assert DEFAULT_LIMIT.max_integer_digits == 20


class TestParseConditionalParam:
    @pytest.mark.parametrize(
        ("param", "expected"),
        [
            ("2@Mode=mode1", ConditionalRule("2", "Mode", "mode1")),
            ("@Status=active", ConditionalRule("", "Status", "active")),
            ("10:2@Type=credit", ConditionalRule("10:2", "Type", "credit")),
            ("2@Mode=", ConditionalRule("2", "Mode", "")),
        ],
    )
    def test_valid(self, param: str, expected: ConditionalRule) -> None:
        assert parse_conditional_param(param) == expected

    @pytest.mark.parametrize(
        "param",
        ["2Mode=mode1", "", "2@Mode", "2@@Mode=x", "2@Mode=a=b", "a@b@c=d"],
    )
    def test_invalid_raises(self, param: str) -> None:
        with pytest.raises(InvalidParameterError):
            parse_conditional_param(param)

    def test_invalid_parameter_is_value_error(self) -> None:
        assert issubclass(InvalidParameterError, ValueError)
