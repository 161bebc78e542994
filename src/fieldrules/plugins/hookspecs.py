"""Pluggy hook specifications for fieldrules.

One setup-time hook lets plugins contribute rule handlers.  Rules are
collected once, when the registry is built, and never re-read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from fieldrules.engine.rules import RuleHandler

hookspec = pluggy.HookspecMarker("fieldrules")
hookimpl = pluggy.HookimplMarker("fieldrules")


class FieldRulesHookSpec:
    """Hook specifications for the fieldrules plugin system."""

    @hookspec
    def register_rules(self) -> dict[str, RuleHandler] | None:
        """Return rule name -> handler mappings to add to the registry."""
