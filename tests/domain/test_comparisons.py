"""Tests for decimal comparison rules."""

from __future__ import annotations

import operator

import pytest

from fieldrules.domain.comparisons import COMPARATORS, SYMBOLS, compare_decimal_strings
from fieldrules.domain.types import FailureKind


class TestComparators:
    def test_six_operators(self) -> None:
        assert set(COMPARATORS) == {"dgt", "dgte", "dlt", "dlte", "deq", "dneq"}
        assert set(SYMBOLS) == set(COMPARATORS)

    @pytest.mark.parametrize(
        ("name", "value", "operand", "expected"),
        [
            ("dgt", "150.00", "100.00", True),
            ("dgt", "50.00", "100.00", False),
            ("dgt", "100", "100", False),
            ("dgte", "100", "100.000", True),
            ("dgte", "99.99", "100", False),
            ("dlt", "99.99", "100", True),
            ("dlt", "100", "100", False),
            ("dlte", "100.00", "100", True),
            ("dlte", "100.01", "100", False),
            ("deq", "100.00", "100.00", True),
            ("deq", "100.01", "100.00", False),
            ("dneq", "100.01", "100.00", True),
            ("dneq", "100.0", "100", False),
            ("dgt", "-1", "-2", True),
        ],
    )
    def test_table(self, name: str, value: str, operand: str, expected: bool) -> None:
        assert bool(compare_decimal_strings(value, operand, COMPARATORS[name])) is expected

    def test_trailing_zeros_compare_equal(self) -> None:
        assert compare_decimal_strings("100.50", "100.5", operator.eq)

    def test_exact_beyond_float_precision(self) -> None:
        big = "12345678901234567890.000000000000000001"
        assert compare_decimal_strings(big, "12345678901234567890", operator.gt)
        assert not compare_decimal_strings(big, "12345678901234567890", operator.eq)


class TestMalformedSides:
    def test_malformed_value(self) -> None:
        verdict = compare_decimal_strings("abc", "100", operator.gt)
        assert not verdict
        assert verdict.kind is FailureKind.MALFORMED_VALUE

    def test_malformed_operand(self) -> None:
        verdict = compare_decimal_strings("150", "abc", operator.gt)
        assert not verdict
        assert verdict.kind is FailureKind.MALFORMED_PARAMETER

    def test_empty_operand(self) -> None:
        assert not compare_decimal_strings("150", "", operator.gt)

    def test_non_string_value(self) -> None:
        assert not compare_decimal_strings(150, "100", operator.gt)
