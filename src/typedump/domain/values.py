"""Value kinds and classification.

Every runtime value falls into exactly one :class:`ValueKind`.  The kind
decides which rendering path the engine takes and, for non-composite
kinds, doubles as the type key a renderer can be registered under.
"""

from __future__ import annotations

import io
import socket
import types
from collections.abc import Collection, Mapping
from enum import StrEnum
from typing import Any

from typedump.domain.errors import ConfigurationError


class ValueKind(StrEnum):
    """Classification of a runtime value."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    COMPOSITE = "object"
    OPAQUE = "opaque"


#: Kind tags that are not composite type names.
KIND_KEYS: frozenset[str] = frozenset(kind.value for kind in ValueKind)

#: Registry key of the renderer used for any composite without a better match.
COMPOSITE_FALLBACK_KEY = ValueKind.COMPOSITE.value

# Host categories with no meaningful field structure: live handles,
# code objects, and raw binary/numeric payloads.
_OPAQUE_TYPES: tuple[type, ...] = (
    io.IOBase,
    socket.socket,
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    types.FrameType,
    types.TracebackType,
    types.CodeType,
    bytes,
    bytearray,
    memoryview,
    complex,
)

def classify(value: Any) -> ValueKind:
    """Return the single kind *value* belongs to.

    Order matters: ``bool`` is checked before ``int`` and ``str`` before
    the generic sequence check, since both are subclasses in Python.
    Any sized, iterable container that is not a mapping (lists, sets,
    deques, dict views) is a sequence, numbered in iteration order.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, _OPAQUE_TYPES):
        return ValueKind.OPAQUE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Collection):
        return ValueKind.SEQUENCE
    return ValueKind.COMPOSITE


def type_key(cls: type) -> str:
    """Fully-qualified name of *cls*, e.g. ``"decimal.Decimal"``."""
    module = cls.__module__
    if module in (None, "builtins"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def normalize_type_key(key: str | type) -> str:
    """Turn *key* into a registry key.

    Classes are converted with :func:`type_key`; strings are stripped.

    Raises:
        ConfigurationError: If the resulting key is empty.
    """
    if isinstance(key, type):
        return type_key(key)
    if not isinstance(key, str):
        msg = f"Type key must be a string or a class, got {type(key).__name__}"
        raise ConfigurationError(msg)
    normalized = key.strip()
    if not normalized:
        msg = "The type key cannot be empty."
        raise ConfigurationError(msg)
    return normalized
