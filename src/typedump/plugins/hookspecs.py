"""Pluggy hook specifications for typedump.

One setup-time hook lets plugins contribute renderers to a registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from typedump.engine.registry import Renderer

hookspec = pluggy.HookspecMarker("typedump")


class TypedumpHookSpec:
    """Hook specifications for the typedump plugin system."""

    @hookspec
    def register_renderers(self) -> dict[str, Renderer] | None:
        """Return renderers to register, keyed by type key.

        Keys are kind tags (``"integer"``), ``"object"``, or fully-qualified
        class names.  Entries are registered in dict order, which is also
        their is-a resolution order.
        """
