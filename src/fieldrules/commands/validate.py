"""Command: validate a JSON record against a JSON rules file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fieldrules.commands._base import FieldRulesCommand

if TYPE_CHECKING:
    from fieldrules.commands._context import AppContext


@click.command(
    cls=FieldRulesCommand,
    examples="""\
  fieldrules validate payment.json --rules payment.rules.json
  fieldrules --json validate payment.json --rules payment.rules.json
  fieldrules -v validate order.json --rules order.rules.json""",
)
@click.argument("record", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--rules",
    "rules_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='JSON object mapping field names to rule tags, e.g. {"Amount": "decimal=10:2"}.',
)
@click.pass_obj
def validate(app: AppContext, record: Path, rules_path: Path) -> None:
    """Validate the fields of a JSON RECORD."""
    from fieldrules.services.rules import RuleService

    svc = RuleService(app.validator)
    app.emit(svc.validate_files(record, rules_path))
