"""Extension layer: plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from datespin.plugins.hookspecs import hookimpl
from datespin.plugins.manager import PluginManager
from datespin.plugins.relay import PluginRelay

__all__ = ["PluginManager", "PluginRelay", "hookimpl"]
