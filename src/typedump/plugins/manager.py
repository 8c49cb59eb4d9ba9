"""Plugin discovery and renderer installation.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery from ``.typedump/plugins/``.
Capabilities: contribute renderers through ``register_renderers``.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pluggy

from typedump.domain.errors import ConfigurationError
from typedump.domain.values import normalize_type_key
from typedump.plugins.hookspecs import TypedumpHookSpec

if TYPE_CHECKING:
    from typedump.engine.registry import RendererRegistry

PROJECT_NAME = "typedump"
ENTRY_POINT_GROUP = "typedump.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and renderer installation."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(TypedumpHookSpec)

    def discover_and_load(
        self,
        *,
        local_dir: Path | None = None,
        entry_points: bool = True,
    ) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Returns a list of loaded plugin names.
        """
        if entry_points:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
            self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        if self._pm.has_plugin(resolved_name):
            logger.debug("Plugin %s already registered", resolved_name)
            return
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [name for name, plugin in self._pm.list_name_plugin() if plugin is not None]

    # ------------------------------------------------------------------
    # Renderer installation
    # ------------------------------------------------------------------

    def install_renderers(self, registry: RendererRegistry) -> list[str]:
        """Register every plugin's renderers into *registry*.

        Plugins are visited in registration order.  A plugin that raises,
        returns a non-dict, or offers an invalid key is logged and skipped.
        Returns the type keys that were registered.
        """
        installed: list[str] = []
        for plugin_name, plugin in self._pm.list_name_plugin():
            if plugin is None:
                continue  # blocked
            hook = getattr(plugin, "register_renderers", None)
            if hook is None:
                continue

            try:
                renderers = hook()
            except Exception:
                logger.warning(
                    "Failed to collect renderers from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            if renderers is None:
                continue
            if not isinstance(renderers, dict):
                logger.warning("Plugin %s returned non-dict renderer registrations", plugin_name)
                continue

            for type_key, renderer in renderers.items():
                if not callable(getattr(renderer, "render", None)):
                    logger.warning(
                        "Skipping renderer %r from plugin %s: no render() method",
                        type_key,
                        plugin_name,
                    )
                    continue
                try:
                    key = normalize_type_key(type_key)
                    registry.register(key, renderer)
                except ConfigurationError:
                    logger.warning(
                        "Skipping renderer registration %r from plugin %s",
                        type_key,
                        plugin_name,
                        exc_info=True,
                    )
                    continue
                installed.append(key)
        return installed

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module. Classes inside the module that carry hookimpl-decorated
        methods are instantiated and registered.  Errors are logged as
        warnings and the file is skipped.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"typedump_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name:
                    continue  # skip imported classes
                if not self._has_hook_impls(obj):
                    continue
                try:
                    self.register_plugin(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace entry-point plugin classes with instances.

        Hook dispatch against a class object leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any ``@hookimpl``-decorated methods.

        ``HookimplMarker("typedump")`` sets a ``typedump_impl`` attribute.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "typedump_impl", None):
                return True
        return False
