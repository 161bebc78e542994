"""The rule registry — an immutable name -> Rule mapping built once.

The registry is assembled from the built-in rules, rules contributed by
plugins, and rules passed explicitly by the caller.  After construction
it is read-only and safe to share between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from fieldrules.engine.rules import Rule, RuleHandler, build_builtin_rules

if TYPE_CHECKING:
    from fieldrules.config.settings import FieldRulesSettings
    from fieldrules.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

# Handled by the validator itself, never looked up in the registry.
HOST_DIRECTIVES = frozenset({"omitempty"})


class UnknownRuleError(KeyError):
    """A tag names a rule the registry does not know."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown validation rule: {self.name!r}"


class RuleRegistry(Mapping[str, Rule]):
    """Read-only mapping of rule name to :class:`Rule`."""

    def __init__(self, rules: Mapping[str, Rule]) -> None:
        self._rules: Mapping[str, Rule] = MappingProxyType(dict(rules))

    def __getitem__(self, name: str) -> Rule:
        return self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry({sorted(self._rules)!r})"

    def resolve(self, name: str) -> Rule:
        """Look up *name*, raising :class:`UnknownRuleError` when absent."""
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def names(self) -> list[str]:
        return sorted(self._rules)


def build_registry(
    settings: FieldRulesSettings | None = None,
    *,
    plugins: PluginManager | None = None,
    extra: Mapping[str, RuleHandler] | None = None,
) -> RuleRegistry:
    """Assemble the registry from built-ins, plugins and *extra* handlers.

    Plugin rules that collide with an existing name are skipped with a
    warning.  Colliding *extra* rules are a programming error and raise
    ``ValueError``.  Plugins are ignored when ``[plugins] enabled`` is off.
    """
    if settings is None:
        from fieldrules.config.settings import FieldRulesSettings

        settings = FieldRulesSettings.from_cli()

    rules = build_builtin_rules(settings)

    if plugins is not None and settings.plugins.enabled:
        for name, (handler, plugin_name) in plugins.collect_rules().items():
            if name in rules or name in HOST_DIRECTIVES:
                logger.warning(
                    "Plugin %s may not override rule %r; skipped", plugin_name, name
                )
                continue
            rules[name] = Rule(name, handler, source=plugin_name)

    for name, handler in (extra or {}).items():
        if name in rules or name in HOST_DIRECTIVES:
            msg = f"Rule {name!r} is already registered"
            raise ValueError(msg)
        rules[name] = Rule(name, handler, source="extra")

    return RuleRegistry(rules)
