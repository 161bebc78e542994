"""Tests for the validate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from fieldrules.cli import cli


def _write(path: Path, payload: object) -> str:
    path.write_text(json.dumps(payload))
    return str(path)


@pytest.mark.usefixtures("isolated_cwd")
class TestValidateCommand:
    def test_valid_record(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        record = _write(tmp_path / "payment.json", {"Type": "debit", "Amount": "n/a"})
        rules = _write(tmp_path / "rules.json", {"Amount": "decimal_if=2@Type=credit"})
        result = cli_runner.invoke(cli, ["validate", record, "--rules", rules])
        assert result.exit_code == 0
        assert "validate_record" in result.output
        assert "fields: 1" in result.output

    def test_invalid_record(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        record = _write(
            tmp_path / "payment.json",
            {"Type": "credit", "Amount": "100.500", "Site": "http://example.com"},
        )
        rules = _write(
            tmp_path / "rules.json",
            {"Amount": "required,decimal_if=2@Type=credit", "Site": "https_url"},
        )
        result = cli_runner.invoke(cli, ["validate", record, "--rules", rules])
        assert result.exit_code == 1
        assert "2 rule failures" in result.output
        assert "Amount [decimal_if=2@Type=credit]" in result.output
        assert "Site must be a valid HTTPS URL" in result.output

    def test_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        record = _write(tmp_path / "r.json", {"Price": "99.99"})
        rules = _write(tmp_path / "rules.json", {"Price": "dgt=0,dlt=100"})
        result = cli_runner.invoke(cli, ["--json", "validate", record, "--rules", rules])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"] == {"valid": True, "fields": 1}

    def test_numeric_json_amounts(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        record = tmp_path / "r.json"
        record.write_text('{"Amount": 100.50, "Qty": 7}')
        rules = _write(
            tmp_path / "rules.json", {"Amount": "decimal=10:2,dgt=0", "Qty": "decimal=3:0"}
        )
        result = cli_runner.invoke(cli, ["validate", str(record), "--rules", rules])
        assert result.exit_code == 0
        assert "fields: 2" in result.output

    def test_numeric_json_keeps_trailing_zeros(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        record = tmp_path / "r.json"
        record.write_text('{"Amount": 100.500}')
        rules = _write(tmp_path / "rules.json", {"Amount": "decimal=10:2"})
        result = cli_runner.invoke(cli, ["validate", str(record), "--rules", rules])
        assert result.exit_code == 1
        assert "Amount [decimal=10:2]" in result.output

    def test_absent_field_warning(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        record = _write(tmp_path / "r.json", {"Amount": "1.00"})
        rules = _write(
            tmp_path / "rules.json", {"Amount": "decimal=2", "Fee": "omitempty,dgte=0"}
        )
        result = cli_runner.invoke(cli, ["validate", record, "--rules", rules])
        assert result.exit_code == 0
        assert "WARNING: Field 'Fee' is not in the record" in result.output

    def test_bad_json_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        record = tmp_path / "r.json"
        record.write_text("{oops")
        rules = _write(tmp_path / "rules.json", {})
        result = cli_runner.invoke(cli, ["validate", str(record), "--rules", rules])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        rules = _write(tmp_path / "rules.json", {})
        result = cli_runner.invoke(cli, ["validate", "nope.json", "--rules", rules])
        assert result.exit_code == 2

    def test_verbose_shows_detail(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        record = _write(tmp_path / "r.json", {"Amount": "1.234"})
        rules = _write(tmp_path / "rules.json", {"Amount": "decimal=2"})
        result = cli_runner.invoke(cli, ["-v", "validate", record, "--rules", rules])
        assert result.exit_code == 1
        assert "kind: out_of_limit" in result.output
