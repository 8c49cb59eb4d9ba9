"""Resolver — choose the renderer for a value.

Resolution order:

1. Non-composite kinds: the renderer registered under the kind tag,
   else the engine's built-in formatting.
2. Composites, exact match: first registered key equal to the value's
   fully-qualified type name.
3. Composites, is-a match: first registered key (registration order)
   naming any class in the value's ancestry or capability set.
4. The renderer registered under ``"object"``.
5. The built-in :class:`GenericIntrospector`.

Ancestry matches are decided by registration order, not by how close the
ancestor is in the MRO.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typedump.domain.fields import type_metadata
from typedump.domain.values import ValueKind, classify
from typedump.engine.introspector import GenericIntrospector

if TYPE_CHECKING:
    from typedump.engine.dumper import Dumper
    from typedump.engine.registry import Renderer, RendererRegistry


class BuiltinRenderer:
    """Built-in formatting for primitives, containers, and opaque values."""

    def render(self, value: Any, depth: int, dumper: Dumper) -> str:
        return dumper.render_builtin(value, depth)

    def __repr__(self) -> str:
        return "BuiltinRenderer()"


BUILTIN_RENDERER = BuiltinRenderer()
GENERIC_INTROSPECTOR = GenericIntrospector()


def resolve(value: Any, registry: RendererRegistry, kind: ValueKind | None = None) -> Renderer:
    """Return the renderer that should render *value*."""
    kind = kind or classify(value)

    if kind is not ValueKind.COMPOSITE:
        return registry.get(kind.value) or BUILTIN_RENDERER

    meta = type_metadata(type(value))
    entries = list(registry.composite_entries())

    for key, renderer in entries:
        if key == meta.name:
            return renderer

    for key, renderer in entries:
        if meta.is_a(key):
            return renderer

    return registry.fallback or GENERIC_INTROSPECTOR
