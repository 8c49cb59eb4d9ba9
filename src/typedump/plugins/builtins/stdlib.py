"""Built-in renderers for common standard-library value types.

Without these, dates, decimals, paths, enums, and UUIDs would go through
the generic introspector and show their private storage slots instead of
their value.  ``datetime.datetime`` is handled by the ``datetime.date``
renderer through the is-a match.
"""

from __future__ import annotations

import datetime as dt
import decimal
import enum
import pathlib
import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pluggy

from typedump.domain.values import type_key
from typedump.engine.registry import TypeRenderer

if TYPE_CHECKING:
    from typedump.engine.dumper import Dumper
    from typedump.engine.registry import Renderer

hookimpl = pluggy.HookimplMarker("typedump")


class ScalarRenderer(TypeRenderer):
    """One-line ``LABEL text`` rendering for value-like objects.

    The label defaults to the upper-cased class name of the value.
    """

    def __init__(
        self,
        cls: type,
        fmt: Callable[[Any], str],
        label: str | None = None,
    ) -> None:
        super().__init__(cls)
        self._fmt = fmt
        self._label = label

    def render(self, value: Any, depth: int, dumper: Dumper) -> str:
        label = self._label or type(value).__name__.upper()
        return f"{dumper.indent(depth)}{label} {self._fmt(value)}"


class EnumRenderer(TypeRenderer):
    """``ENUM module.Class.MEMBER = <value>``"""

    def __init__(self) -> None:
        super().__init__(enum.Enum)

    def render(self, value: Any, depth: int, dumper: Dumper) -> str:
        member = f"{type_key(type(value))}.{value.name}"
        rendered = dumper.render(value.value, depth).strip()
        return f"{dumper.indent(depth)}ENUM {member} = {rendered}"


def _quoted(value: Any) -> str:
    return f"'{value}'"


def _iso(value: dt.date | dt.time) -> str:
    return f"'{value.isoformat()}'"


def builtin_renderers() -> list[TypeRenderer]:
    """Renderers in registration (and is-a resolution) order."""
    return [
        ScalarRenderer(dt.date, _iso),
        ScalarRenderer(dt.time, _iso),
        ScalarRenderer(dt.timedelta, _quoted),
        ScalarRenderer(decimal.Decimal, str),
        ScalarRenderer(pathlib.PurePath, _quoted, label="PATH"),
        ScalarRenderer(uuid.UUID, _quoted),
        EnumRenderer(),
    ]


class StdlibRenderersPlugin:
    """Registers :func:`builtin_renderers`."""

    @hookimpl
    def register_renderers(self) -> dict[str, Renderer]:
        return {renderer.type_key: renderer for renderer in builtin_renderers()}
