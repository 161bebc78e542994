"""Command: check one value against a rule tag."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fieldrules.commands._base import FieldRulesCommand

if TYPE_CHECKING:
    from fieldrules.commands._context import AppContext


def _parse_fields(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    fields: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            msg = f"Expected NAME=VALUE, got {item!r}"
            raise click.BadParameter(msg)
        fields[name] = value
    return fields


@click.command(
    cls=FieldRulesCommand,
    examples="""\
  fieldrules check 123.45 --rule decimal=10:2
  fieldrules check 150 --rule "dgt=100,dlte=500"
  fieldrules check 100.500 --rule decimal_if=2@Type=credit --field Type=credit
  fieldrules check +66812345678 --rule mobile_e164=TH
  fieldrules --json check abc --rule decimal""",
)
@click.argument("value")
@click.option("-r", "--rule", "tag", required=True, help="Rule tag, e.g. 'required,decimal=10:2'.")
@click.option(
    "-f",
    "--field",
    "fields",
    multiple=True,
    callback=_parse_fields,
    help="Sibling field as NAME=VALUE (repeatable).",
)
@click.pass_obj
def check(app: AppContext, value: str, tag: str, fields: dict[str, str]) -> None:
    """Check VALUE against a rule tag."""
    from fieldrules.services.rules import RuleService

    svc = RuleService(app.validator)
    app.emit(svc.check_value(value, tag, siblings=fields or None))
