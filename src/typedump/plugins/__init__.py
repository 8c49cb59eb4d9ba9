"""Extension layer — renderer plugins via pluggy.

Discovery: entry_points (pip-installed) plus ``.typedump/plugins/*.py``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from typedump.plugins.manager import PluginManager

__all__ = ["PluginManager"]
