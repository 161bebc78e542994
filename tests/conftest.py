"""Shared pytest fixtures and test helpers for fieldrules tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fieldrules.config.settings import FieldRulesSettings
from fieldrules.engine.registry import RuleRegistry, build_registry
from fieldrules.engine.validator import Validator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep FIELDRULES_* variables from the outer shell out of every test."""
    import os

    for key in list(os.environ):
        if key.startswith("FIELDRULES_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after tests that run the CLI."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("fieldrules")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory so no fieldrules.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(isolated_cwd: Path) -> FieldRulesSettings:
    """Code-default settings (no TOML, no env)."""
    return FieldRulesSettings.from_cli(start=isolated_cwd)


@pytest.fixture
def registry(settings: FieldRulesSettings) -> RuleRegistry:
    return build_registry(settings)


@pytest.fixture
def validator(registry: RuleRegistry, settings: FieldRulesSettings) -> Validator:
    return Validator(registry, settings=settings)
