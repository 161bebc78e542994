"""Extension layer — plugin system via pluggy.

Plugins are found through the ``fieldrules.plugins`` entry-point group
and in a project's ``.fieldrules/plugins/`` directory.
INVARIANT: Plugin failures are warnings, never errors.
"""

from fieldrules.plugins.hookspecs import hookimpl
from fieldrules.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
