"""Composite type metadata and field walking.

Python has no visibility keywords, so visibility follows naming
convention: a name-mangled ``__name`` attribute is private, a single
leading underscore is protected, anything else is public.

Field values are read from the instance ``__dict__`` (insertion order)
and then from ``__slots__`` declared anywhere in the MRO.  Dunder names
are never fields.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from typedump.domain.values import type_key


class Visibility(StrEnum):
    """Field visibility tags, in rendering order."""

    PRIVATE = "private"
    PROTECTED = "protected"
    PUBLIC = "public"


VISIBILITY_ORDER: tuple[Visibility, ...] = (
    Visibility.PRIVATE,
    Visibility.PROTECTED,
    Visibility.PUBLIC,
)


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a composite value, produced while walking it."""

    name: str
    visibility: Visibility
    declared_type: str
    value: Any


@dataclass(frozen=True)
class TypeMetadata:
    """Ancestry and capability information for a composite type.

    Attributes:
        name: Fully-qualified name of the type itself.
        parent: Fully-qualified name of the direct parent, or None.
        ancestry: The type followed by its first-base chain, excluding ``object``.
        capabilities: Every other class in the MRO (mixins, ABCs, protocols).
    """

    name: str
    parent: str | None
    ancestry: tuple[str, ...]
    capabilities: tuple[str, ...]

    def is_a(self, key: str) -> bool:
        """Whether *key* names this type, an ancestor, or a capability."""
        return key in self.ancestry or key in self.capabilities


def type_metadata(cls: type) -> TypeMetadata:
    """Build :class:`TypeMetadata` for *cls* from its MRO."""
    chain: list[type] = []
    current: type | None = cls
    while current is not None and current is not object:
        chain.append(current)
        bases = current.__bases__
        current = bases[0] if bases else None

    capabilities = [c for c in cls.__mro__ if c not in chain and c is not object]

    ancestry = tuple(type_key(c) for c in chain)
    return TypeMetadata(
        name=type_key(cls),
        parent=ancestry[1] if len(ancestry) > 1 else None,
        ancestry=ancestry,
        capabilities=tuple(type_key(c) for c in capabilities),
    )


# ---------------------------------------------------------------------------
# Field walking
# ---------------------------------------------------------------------------


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _mangle(cls: type, name: str) -> str:
    """Apply Python's private-name mangling for *name* inside *cls*."""
    if name.startswith("__") and not name.endswith("__"):
        return f"_{cls.__name__.lstrip('_')}{name}"
    return name


def _unmangle(cls: type, attr: str) -> str | None:
    """Return the source name (``__x``) if *attr* is mangled by a class in *cls*'s MRO."""
    for klass in cls.__mro__:
        prefix = f"_{klass.__name__.lstrip('_')}__"
        if attr.startswith(prefix) and len(attr) > len(prefix) and not attr.endswith("__"):
            return attr[len(prefix) - 2 :]
    return None


def _annotation_label(annotation: Any) -> str:
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def _declared_types(cls: type) -> dict[str, str]:
    """Merge annotations across the MRO, most-derived class winning."""
    labels: dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        try:
            annotations = inspect.get_annotations(klass)
        except NameError:
            continue  # unresolved forward reference; fall back to inferred types
        for name, annotation in annotations.items():
            labels[name] = _annotation_label(annotation)
    return labels


def _inferred_type(value: Any) -> str:
    if value is None:
        return "None"
    return type(value).__name__


def _stored_attributes(value: Any) -> list[tuple[str, Any]]:
    """Return ``(raw_name, value)`` pairs in storage order."""
    attrs: list[tuple[str, Any]] = []
    seen: set[str] = set()

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name, item in instance_dict.items():
            if not isinstance(name, str) or _is_dunder(name):
                continue
            attrs.append((name, item))
            seen.add(name)

    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if _is_dunder(slot):
                continue
            raw = _mangle(klass, slot)
            if raw in seen:
                continue
            try:
                item = getattr(value, raw)
            except AttributeError:
                continue  # declared but never assigned
            attrs.append((raw, item))
            seen.add(raw)

    return attrs


def walk_fields(value: Any) -> list[FieldDescriptor]:
    """Describe every stored field of *value*, in storage order."""
    cls = type(value)
    declared = _declared_types(cls)
    fields: list[FieldDescriptor] = []

    for raw, item in _stored_attributes(value):
        source_name = _unmangle(cls, raw)
        if source_name is not None:
            name, visibility = source_name, Visibility.PRIVATE
        elif raw.startswith("_"):
            name, visibility = raw, Visibility.PROTECTED
        else:
            name, visibility = raw, Visibility.PUBLIC

        fields.append(
            FieldDescriptor(
                name=name,
                visibility=visibility,
                declared_type=declared.get(raw) or _inferred_type(item),
                value=item,
            )
        )
    return fields
