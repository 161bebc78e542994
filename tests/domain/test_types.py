"""Tests for verdicts and the failure taxonomy."""

from __future__ import annotations

from fieldrules.domain.types import FailureKind, Verdict


class TestVerdict:
    def test_ok_is_truthy(self) -> None:
        assert Verdict.ok()
        assert Verdict.ok().kind is None

    def test_fail_is_falsy_and_carries_kind(self) -> None:
        verdict = Verdict.fail(FailureKind.OUT_OF_LIMIT, "too big")
        assert not verdict
        assert verdict.kind is FailureKind.OUT_OF_LIMIT
        assert verdict.detail == "too big"

    def test_ok_is_shared(self) -> None:
        assert Verdict.ok() is Verdict.ok()


class TestFailureKind:
    def test_values_are_strings(self) -> None:
        assert FailureKind.MALFORMED_VALUE == "malformed_value"
        assert FailureKind.SIBLING_NOT_FOUND == "sibling_not_found"

    def test_all_members(self) -> None:
        assert {k.name for k in FailureKind} == {
            "MALFORMED_VALUE",
            "MALFORMED_PARAMETER",
            "OUT_OF_LIMIT",
            "SIBLING_NOT_FOUND",
            "REQUIRED",
        }
