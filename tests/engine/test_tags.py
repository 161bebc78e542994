"""Tests for rule tag parsing."""

from __future__ import annotations

import pytest

from fieldrules.domain.params import InvalidParameterError
from fieldrules.engine.tags import RuleCall, parse_tag


class TestParseTag:
    def test_names_and_params(self) -> None:
        assert parse_tag("required,decimal=10:2") == [
            RuleCall("required"),
            RuleCall("decimal", "10:2"),
        ]

    def test_param_keeps_inner_equals(self) -> None:
        assert parse_tag("decimal_if=2@Mode=credit") == [RuleCall("decimal_if", "2@Mode=credit")]

    def test_blank_items_ignored(self) -> None:
        assert parse_tag(" decimal , ,dgt=1 ") == [RuleCall("decimal"), RuleCall("dgt", "1")]

    def test_empty_tag(self) -> None:
        assert parse_tag("") == []

    def test_empty_param(self) -> None:
        assert parse_tag("decimal=") == [RuleCall("decimal", "")]

    def test_missing_name_raises(self) -> None:
        with pytest.raises(InvalidParameterError):
            parse_tag("=10:2")


class TestRuleCall:
    def test_str(self) -> None:
        assert str(RuleCall("decimal", "10:2")) == "decimal=10:2"
        assert str(RuleCall("required")) == "required"
