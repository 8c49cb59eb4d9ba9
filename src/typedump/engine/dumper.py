"""Dumper — the recursive, indentation-aware renderer.

``Dumper.render`` is the single entry point: it classifies the value,
asks the resolver for a renderer, and lets that renderer recurse back
through ``render`` with ``depth + 1`` for nested members.  Nothing is
cached between calls, so renderers may re-enter freely.

Self-referential structures are not detected; they recurse until Python
raises :class:`RecursionError`, which propagates to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from typedump.domain.values import ValueKind, classify
from typedump.engine.indent import IndentFunction, IndentPolicy
from typedump.engine.registry import RendererRegistry
from typedump.engine.resolver import resolve

logger = logging.getLogger(__name__)


class Dumper:
    """Render arbitrary values into indented debug text.

    Args:
        registry: Renderer registry consulted on every render.  A fresh,
            empty registry is created when omitted.
        indent: Indentation policy; defaults to four spaces per level.
    """

    def __init__(
        self,
        registry: RendererRegistry | None = None,
        indent: IndentFunction | None = None,
    ) -> None:
        self.registry = registry if registry is not None else RendererRegistry()
        self._indent: IndentFunction = indent or IndentPolicy()

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    def indent(self, level: int) -> str:
        """Whitespace prefix for nesting *level*."""
        return self._indent(level)

    def set_indent_policy(self, policy: IndentFunction) -> None:
        """Replace the indentation policy for subsequent renders."""
        self._indent = policy

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def render(self, value: Any, depth: int = 0) -> str:
        """Return the dump of *value* at nesting *depth*."""
        if depth < 0:
            msg = f"depth must be >= 0, got {depth}"
            raise ValueError(msg)
        kind = classify(value)
        renderer = resolve(value, self.registry, kind)
        return renderer.render(value, depth, self)

    # ------------------------------------------------------------------
    # Built-in formatting (used when no renderer is registered for a kind)
    # ------------------------------------------------------------------

    def render_builtin(self, value: Any, depth: int) -> str:
        """Format *value* without consulting the registry for its own kind."""
        kind = classify(value)
        prefix = self.indent(depth)

        if kind is ValueKind.NULL:
            return prefix + "NULL"
        if kind is ValueKind.BOOLEAN:
            return prefix + ("TRUE" if value else "FALSE")
        if kind is ValueKind.INTEGER:
            return prefix + "%d" % value
        if kind is ValueKind.FLOAT:
            return prefix + "%f" % value
        if kind is ValueKind.TEXT:
            return prefix + "'" + value + "'"
        if kind is ValueKind.MAPPING:
            return self._render_container("MAPPING", list(value.items()), depth)
        if kind is ValueKind.SEQUENCE:
            return self._render_container("SEQUENCE", list(enumerate(value)), depth)
        if kind is ValueKind.OPAQUE:
            return self._render_opaque(value)
        # Composites never reach here through resolve(); route them anyway.
        return self.render(value, depth)

    def _render_container(self, label: str, entries: list[tuple[Any, Any]], depth: int) -> str:
        result = self.indent(depth) + label + " [\n"
        if not entries:
            return result + self.indent(depth) + "]\n"

        pad = self.indent(depth + 1)
        # Keys render one level deeper so multi-line (composite) keys nest
        # under their entry; alignment is on the column where a key ends.
        keys = ["[" + self.render(key, depth + 1).strip() + "]" for key, _ in entries]
        ends = [_end_column(pad + key) for key in keys]
        width = max(ends)

        lines = []
        for key, end, (_, item) in zip(keys, ends, entries, strict=True):
            rendered = self.render(item, depth + 1).lstrip()
            lines.append((pad + key + " " * (width - end) + " => " + rendered).rstrip())

        return result + ",\n".join(lines) + "\n" + self.indent(depth) + "]\n"

    @staticmethod
    def _render_opaque(value: Any) -> str:
        try:
            text = repr(value)
        except Exception:
            logger.debug("repr() failed for %s", type(value).__name__, exc_info=True)
            text = f"<unrepresentable {type(value).__name__}>"
        return "OPAQUE " + text


def _end_column(text: str) -> int:
    """Width of the last line of *text*."""
    return len(text.rsplit("\n", 1)[-1])
