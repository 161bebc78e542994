"""Tests for Rich renderers."""

from __future__ import annotations

from fieldrules.output.renderers import render_quiet, render_result
from fieldrules.services.result import ServiceError, ServiceResult


def _validation_failure() -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="validate_record",
        error=ServiceError(
            code="VALIDATION_FAILED",
            message="Amount must be a decimal with precision ≤ 10 and scale ≤ 2",
            detail={
                "errors": [
                    {
                        "field": "Amount",
                        "rule": "decimal",
                        "param": "10:2",
                        "value": "1.234",
                        "kind": "out_of_limit",
                        "detail": "3 fractional digits exceed scale 2",
                        "message": "Amount must be a decimal with precision ≤ 10 and scale ≤ 2",
                    }
                ]
            },
        ),
    )


class TestRenderResult:
    def test_check_value(self) -> None:
        result = ServiceResult(
            ok=True, op="check_value", data={"valid": True, "value": "1.5", "tag": "decimal"}
        )
        output = render_result(result)
        assert "OK" in output
        assert "value: 1.5" in output
        assert "tag: decimal" in output

    def test_validate_record(self) -> None:
        result = ServiceResult(ok=True, op="validate_record", data={"valid": True, "fields": 3})
        assert "fields: 3" in render_result(result)

    def test_rules_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_rules",
            data={
                "items": [
                    {"name": "decimal", "source": "builtin", "description": "Decimal string"},
                    {"name": "iso4217", "source": "currency", "description": ""},
                ],
                "count": 2,
            },
        )
        output = render_result(result)
        assert "decimal" in output
        assert "iso4217" in output
        assert "currency" in output

    def test_empty_rules(self) -> None:
        result = ServiceResult(ok=True, op="list_rules", data={"items": [], "count": 0})
        assert "No rules registered." in render_result(result)

    def test_field_errors(self) -> None:
        output = render_result(_validation_failure())
        assert "ERROR" in output
        assert "1 rule failure" in output
        assert "Amount [decimal=10:2]" in output
        assert "scale ≤ 2" in output
        assert "fractional digits" not in output

    def test_field_errors_verbose(self) -> None:
        output = render_result(_validation_failure(), verbose=True)
        assert "value: '1.234'" in output
        assert "kind: out_of_limit" in output
        assert "3 fractional digits exceed scale 2" in output

    def test_plain_error_with_brackets(self) -> None:
        result = ServiceResult(
            ok=False,
            op="check_value",
            error=ServiceError(code="INVALID_TAG", message="Bad tag [/oops]"),
        )
        assert "Bad tag [/oops]" in render_result(result)

    def test_meta_only_when_verbose(self) -> None:
        result = ServiceResult(
            ok=True,
            op="validate_record",
            data={"valid": True, "fields": 1},
            meta={"config_path": "/srv/fieldrules.toml"},
        )
        assert "config_path" not in render_result(result)
        assert "config_path: /srv/fieldrules.toml" in render_result(result, verbose=True)

    def test_generic_op(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"items": [1, 2]})
        assert "items: [1,2]" in render_result(result)


class TestRenderQuiet:
    def test_error(self) -> None:
        assert render_quiet(_validation_failure()).startswith("ERROR: validate_record")

    def test_ok(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="check_value")) == "OK: check_value"
