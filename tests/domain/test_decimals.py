"""Tests for decimal literal parsing and canonical rendering."""

from __future__ import annotations

from decimal import Decimal

import pytest

from fieldrules.domain.decimals import (
    DecimalValue,
    MalformedDecimalError,
    parse_decimal,
    render_decimal,
    try_parse_decimal,
)


class TestParseDecimal:
    @pytest.mark.parametrize(
        "text",
        ["0", "123", "-123", "123.45", "-0.001", "000.5", "12345678901234567890123456789.123456789"],
    )
    def test_accepts_plain_literals(self, text: str) -> None:
        parsed = parse_decimal(text)
        assert isinstance(parsed, DecimalValue)
        assert parsed.value == Decimal(text)

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "+1", "1e5", "1E5", " 1", "1 ", ".5", "5.", "1.2.3", "--1", "1,000", "NaN", "Infinity", "1\n", "٣"],
    )
    def test_rejects_everything_else(self, text: str) -> None:
        with pytest.raises(MalformedDecimalError):
            parse_decimal(text)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(MalformedDecimalError):
            parse_decimal(123)  # type: ignore[arg-type]

    def test_malformed_is_value_error(self) -> None:
        assert issubclass(MalformedDecimalError, ValueError)

    def test_keeps_trailing_fractional_zeros(self) -> None:
        parsed = parse_decimal("100.500")
        assert parsed.text == "100.500"
        assert parsed.fractional_part == "500"

    def test_round_trip_is_numerically_equal_with_same_sign(self) -> None:
        for text in ["-12.340", "0.000001", "98765432109876543210.5"]:
            parsed = parse_decimal(text)
            again = parse_decimal(str(parsed))
            assert again.value == parsed.value
            assert again.is_negative == parsed.is_negative


class TestDecimalParts:
    def test_integer_part_strips_sign_and_leading_zeros(self) -> None:
        assert parse_decimal("-000123.4").integer_part == "123"

    def test_integer_part_of_pure_fraction_is_zero(self) -> None:
        assert parse_decimal("0.25").integer_part == "0"

    def test_fractional_part_empty_without_point(self) -> None:
        assert parse_decimal("42").fractional_part == ""

    def test_is_negative(self) -> None:
        assert parse_decimal("-1").is_negative is True
        assert parse_decimal("1").is_negative is False


class TestTryParseDecimal:
    def test_returns_none_for_malformed(self) -> None:
        assert try_parse_decimal("not-a-number") is None

    def test_returns_none_for_non_string(self) -> None:
        assert try_parse_decimal(None) is None
        assert try_parse_decimal(Decimal("1.5")) is None

    def test_returns_value(self) -> None:
        parsed = try_parse_decimal("1.5")
        assert parsed is not None
        assert parsed.value == Decimal("1.5")


class TestRenderDecimal:
    def test_never_scientific(self) -> None:
        assert render_decimal(Decimal("1E+3")) == "1000"
        assert render_decimal(Decimal("1E-7")) == "0.0000001"

    def test_preserves_trailing_zeros(self) -> None:
        assert render_decimal(Decimal("100.500")) == "100.500"
