"""Command class adding an ``--examples`` flag.

``--help`` stays short; ``fieldrules <command> --examples`` prints
ready-to-paste invocations and exits.
"""

from __future__ import annotations

from typing import Any

import click


def examples_option(examples: str) -> click.Option:
    """Build an eager ``--examples`` flag that prints *examples* and exits."""

    def _print(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print,
        help="Show usage examples and exit.",
    )


class FieldRulesCommand(click.Command):
    """``click.Command`` taking an ``examples=`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(examples_option(examples))
