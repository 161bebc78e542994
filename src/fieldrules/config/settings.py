"""FieldRulesSettings: one frozen object for CLI flags, env vars and TOML.

Highest priority wins:

1. keyword arguments (the CLI flags)
2. ``FIELDRULES_*`` environment variables, ``__`` for nesting
   (``FIELDRULES_DECIMAL__DEFAULT_SCALE=6``)
3. ``fieldrules.toml``, found by :func:`~fieldrules.config.discovery.find_config`
4. the defaults on the section models
"""

from __future__ import annotations

import logging
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fieldrules.config.discovery import find_config
from fieldrules.config.models import (
    ConditionalConfig,
    DecimalConfig,
    PasswordConfig,
    PluginsConfig,
)

logger = logging.getLogger(__name__)

# The file chosen by from_cli(), visible to settings_customise_sources() while
# the settings object is being built.
_active_toml: ContextVar[Path | None] = ContextVar("fieldrules_active_toml", default=None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, turning syntax errors into a ClickException."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        import click

        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the sections of a ``fieldrules.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        data = read_toml(toml_path) if toml_path is not None and toml_path.is_file() else {}
        known = set(settings_cls.model_fields)
        for section in sorted(set(data) - known):
            logger.warning("Ignoring unknown section [%s] in %s", section, toml_path)
        self._data = {k: v for k, v in data.items() if k in known}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class FieldRulesSettings(BaseSettings):
    """Everything configurable about rule evaluation and CLI output.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FIELDRULES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # CLI output flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # fieldrules.toml sections
    decimal: DecimalConfig = Field(default_factory=DecimalConfig)
    conditional: ConditionalConfig = Field(default_factory=ConditionalConfig)
    password: PasswordConfig = Field(default_factory=PasswordConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FieldRulesSettings:
        """Build settings for one CLI invocation, or for library use.

        An explicit *config_path* is used only if it is an existing file.
        Without one, ``fieldrules.toml`` is looked up from *start* (or the
        cwd) upwards.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _active_toml.reset(token)
