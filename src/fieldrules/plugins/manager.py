"""Plugin discovery and rule collection.

Plugins come from two places: the ``fieldrules.plugins`` entry-point
group, and single-file modules in a project's ``.fieldrules/plugins/``
directory.  Either way they implement the ``register_rules`` hook.

INVARIANT: Plugin failures are warnings, never errors.  A broken plugin
costs its own rules and nothing else.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

import pluggy

from fieldrules.plugins.hookspecs import FieldRulesHookSpec

if TYPE_CHECKING:
    from fieldrules.engine.rules import RuleHandler

PROJECT_NAME = "fieldrules"
ENTRY_POINT_GROUP = "fieldrules.plugins"
LOCAL_MODULE_PREFIX = "fieldrules_local_plugin_"

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` for rule plugins."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(FieldRulesHookSpec)
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then any single-file plugins in *local_dir*.

        Returns the names of all registered plugins.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._load_local(path)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [name for name, plugin in self._pm.list_name_plugin() if plugin is not None]

    def collect_rules(self) -> dict[str, tuple[RuleHandler, str]]:
        """Gather ``rule name -> (handler, plugin name)`` from every plugin.

        Implementations are visited in registration order, so when two
        plugins offer the same rule name the first one keeps it.
        """
        collected: dict[str, tuple[RuleHandler, str]] = {}
        for impl in self._pm.hook.register_rules.get_hookimpls():
            source = impl.plugin_name
            try:
                offered = impl.function()
            except Exception:
                logger.warning("Failed to collect rules from plugin %s", source, exc_info=True)
                continue

            if offered is None:
                continue
            if not isinstance(offered, dict):
                logger.warning("Plugin %s returned non-dict rule registrations", source)
                continue

            for name, handler in offered.items():
                if not isinstance(name, str) or not callable(handler):
                    logger.warning("Skipping rule registration %r from plugin %s", name, source)
                elif name in collected:
                    logger.warning(
                        "Rule %r from plugin %s already provided by %s",
                        name,
                        source,
                        collected[name][1],
                    )
                else:
                    collected[name] = (handler, source)
        return collected

    # -- loading helpers ---------------------------------------------------

    def _load_local(self, path: Path) -> None:
        module_name = LOCAL_MODULE_PREFIX + path.stem
        try:
            module = _exec_module(module_name, path)
        except Exception:
            logger.warning("Failed to load local plugin %s", path, exc_info=True)
            return

        for cls in _plugin_classes(module):
            try:
                self.register_plugin(cls(), name=module_name)
            except Exception:
                logger.warning(
                    "Failed to instantiate plugin class %s from %s",
                    cls.__name__,
                    path,
                    exc_info=True,
                )

    def _instantiate_class_plugins(self) -> None:
        """Swap plugin classes registered by entry points for instances.

        A class registered as-is would be called with ``self`` unbound.
        """
        for name, plugin in list(self._pm.list_name_plugin()):
            if not inspect.isclass(plugin) or not has_hook_impls(plugin):
                continue
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Failed to instantiate entry-point plugin %s", name, exc_info=True)
                continue
            self._pm.register(instance, name=name)


def has_hook_impls(cls: type) -> bool:
    """Whether any public attribute of *cls* carries the ``@hookimpl`` marker."""
    marker = f"{PROJECT_NAME}_impl"
    return any(
        getattr(getattr(cls, attr, None), marker, None)
        for attr in dir(cls)
        if not attr.startswith("_")
    )


def _exec_module(module_name: str, path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        msg = f"Cannot import {path}"
        raise ImportError(msg)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        raise
    return module


def _plugin_classes(module: ModuleType) -> list[type]:
    return [
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module.__name__ and has_hook_impls(obj)
    ]
