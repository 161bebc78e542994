"""AppContext: the object every command receives via ``@click.pass_obj``.

It owns the settings for one invocation, builds the plugin manager and
validator on demand, and turns a ServiceResult into output and an exit
code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fieldrules.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from fieldrules.config.settings import FieldRulesSettings
    from fieldrules.engine.validator import Validator
    from fieldrules.plugins.manager import PluginManager
    from fieldrules.services.result import ServiceResult

LOCAL_PLUGIN_DIR = Path(".fieldrules") / "plugins"


class AppContext:
    """Per-invocation state shared by the subcommands.

    Nothing is discovered until a command asks for it, so ``--help``,
    ``--version`` and ``--examples`` never import plugins.
    """

    def __init__(self, settings: FieldRulesSettings) -> None:
        from fieldrules.config.logging import configure_logging

        self.settings = settings
        self._plugins: PluginManager | None = None
        self._validator: Validator | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def project_root(self) -> Path:
        """Directory of the loaded fieldrules.toml, else the cwd."""
        config_path = self.settings.config_path
        return config_path.resolve().parent if config_path is not None else Path.cwd()

    @property
    def plugins(self) -> PluginManager | None:
        """Loaded plugins; None when ``[plugins] enabled = false``."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from fieldrules.plugins.manager import PluginManager

            manager = PluginManager()
            manager.discover_and_load(local_dir=self.project_root / LOCAL_PLUGIN_DIR)
            self._plugins = manager
        return self._plugins

    @property
    def validator(self) -> Validator:
        if self._validator is None:
            from fieldrules.engine.registry import build_registry
            from fieldrules.engine.validator import Validator

            registry = build_registry(self.settings, plugins=self.plugins)
            self._validator = Validator(registry, settings=self.settings)
        return self._validator

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Successful output goes to stdout and its warnings to stderr, except
        in ``--json`` mode where warnings are part of the payload.  Failed
        output goes to stderr.
        """
        output = format_result(
            result,
            settings=OutputSettings(
                json_output=self.settings.json_output,
                quiet=self.settings.quiet,
                verbose=self.settings.verbose,
            ),
        )
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
