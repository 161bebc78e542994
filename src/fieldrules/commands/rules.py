"""Command: list registered rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fieldrules.commands._base import FieldRulesCommand

if TYPE_CHECKING:
    from fieldrules.commands._context import AppContext


@click.command(
    cls=FieldRulesCommand,
    examples="""\
  fieldrules rules
  fieldrules -q rules
  fieldrules --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List built-in and plugin rules."""
    from fieldrules.services.rules import RuleService

    app.emit(RuleService(app.validator).list_rules())
