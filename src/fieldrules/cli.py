"""Entry point for the ``fieldrules`` command."""

from __future__ import annotations

import click

from fieldrules import __version__
from fieldrules.commands import register_commands
from fieldrules.commands._context import AppContext
from fieldrules.config.settings import FieldRulesSettings

EPILOG = """\
Settings are read from fieldrules.toml (searched upwards from the current
directory, or named by FIELDRULES_CONFIG) and FIELDRULES_* variables."""


@click.group(invoke_without_command=True, epilog=EPILOG)
@click.version_option(version=__version__, prog_name="fieldrules")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only OK/ERROR or rule names.")
@click.option("-v", "--verbose", is_flag=True, help="Show failing values and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this TOML file instead of searching for fieldrules.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """fieldrules — decimal and format rules for record fields."""
    if json_output and quiet:
        raise click.UsageError("--json and --quiet cannot be combined.")
    settings = FieldRulesSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
