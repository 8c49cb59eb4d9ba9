"""typedump — recursive, indented debug dumps of arbitrary Python values."""

from typedump.api import build_dumper, get_dumper, render, reset_dumper, set_dumper
from typedump.domain.errors import ConfigurationError, TypedumpError
from typedump.domain.values import ValueKind, classify, type_key
from typedump.engine import (
    CallableRenderer,
    Dumper,
    GenericIntrospector,
    IndentPolicy,
    Renderer,
    RendererRegistry,
    TypeRenderer,
    resolve,
)
from typedump.output.border import add_border
from typedump.output.dump import dp, dump

__version__ = "0.1.0"

__all__ = [
    "CallableRenderer",
    "ConfigurationError",
    "Dumper",
    "GenericIntrospector",
    "IndentPolicy",
    "Renderer",
    "RendererRegistry",
    "TypeRenderer",
    "TypedumpError",
    "ValueKind",
    "__version__",
    "add_border",
    "build_dumper",
    "classify",
    "dp",
    "dump",
    "get_dumper",
    "render",
    "reset_dumper",
    "resolve",
    "set_dumper",
    "type_key",
]
