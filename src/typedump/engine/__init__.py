"""Rendering engine — registry, resolver, and the recursive dumper.

INVARIANT: every value is renderable; anything that is not a primitive or
container is introspected or shown as OPAQUE.
"""

from typedump.engine.dumper import Dumper
from typedump.engine.indent import IndentPolicy
from typedump.engine.introspector import GenericIntrospector
from typedump.engine.registry import CallableRenderer, Renderer, RendererRegistry, TypeRenderer
from typedump.engine.resolver import resolve

__all__ = [
    "CallableRenderer",
    "Dumper",
    "GenericIntrospector",
    "IndentPolicy",
    "Renderer",
    "RendererRegistry",
    "TypeRenderer",
    "resolve",
]
