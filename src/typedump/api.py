"""Process-default dumper.

``build_dumper`` assembles a :class:`Dumper` from settings: indentation
width, the built-in stdlib renderers, and any discovered plugins.
``get_dumper`` caches one for the helpers in :mod:`typedump.output.dump`;
callers that need isolation should build their own.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from typedump.config.settings import TypedumpSettings
from typedump.engine.dumper import Dumper
from typedump.engine.indent import IndentPolicy
from typedump.engine.registry import RendererRegistry
from typedump.plugins.builtins.stdlib import StdlibRenderersPlugin
from typedump.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

_default_dumper: Dumper | None = None


def build_plugin_manager(settings: TypedumpSettings, *, root: Path | None = None) -> PluginManager:
    """Create a PluginManager loaded according to ``settings.plugins``."""
    pm = PluginManager()
    cfg = settings.plugins
    if cfg.builtins:
        pm.register_plugin(StdlibRenderersPlugin(), name="stdlib")
    if cfg.enabled:
        base = root or (settings.config_path.parent if settings.config_path else Path.cwd())
        pm.discover_and_load(local_dir=base / cfg.local_dir)
    return pm


def build_dumper(settings: TypedumpSettings | None = None) -> Dumper:
    """Build a Dumper configured from *settings* (discovered when omitted)."""
    settings = settings or TypedumpSettings.from_cli()
    registry = RendererRegistry()
    installed = build_plugin_manager(settings).install_renderers(registry)
    logger.debug("Installed %d plugin renderers", len(installed))
    return Dumper(registry, IndentPolicy(settings.render.indent_width))


def get_dumper() -> Dumper:
    """Return the process-default Dumper, building it on first use."""
    global _default_dumper
    if _default_dumper is None:
        _default_dumper = build_dumper()
    return _default_dumper


def set_dumper(dumper: Dumper) -> None:
    """Replace the process-default Dumper."""
    global _default_dumper
    _default_dumper = dumper


def reset_dumper() -> None:
    """Drop the process-default Dumper; the next use rebuilds it."""
    global _default_dumper
    _default_dumper = None


def render(value: Any, depth: int = 0) -> str:
    """Render *value* with the process-default Dumper."""
    return get_dumper().render(value, depth)
