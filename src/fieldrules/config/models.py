"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fieldrules.toml only contains
overrides.  An empty file (or no file) reproduces the built-in behaviour.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from fieldrules.domain.params import DEFAULT_PRECISION, DEFAULT_SCALE, PrecisionScale
from fieldrules.domain.password import SPECIAL_CHARS, PasswordPolicy

# --- fieldrules.toml sections ---


class DecimalConfig(BaseModel):
    """[decimal] section."""

    model_config = {"frozen": True}

    default_precision: int = DEFAULT_PRECISION
    default_scale: int = DEFAULT_SCALE

    @property
    def default_limit(self) -> PrecisionScale:
        return PrecisionScale(self.default_precision, self.default_scale)


class ConditionalConfig(BaseModel):
    """[conditional] section."""

    model_config = {"frozen": True}

    missing_sibling: Literal["fail", "raise"] = "fail"


class PasswordConfig(BaseModel):
    """[password] section."""

    model_config = {"frozen": True}

    min_length: int = 8
    max_length: int = 100
    special_chars: str = SPECIAL_CHARS

    def to_policy(self) -> PasswordPolicy:
        return PasswordPolicy(
            min_length=self.min_length,
            max_length=self.max_length,
            special_chars=self.special_chars,
        )


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
