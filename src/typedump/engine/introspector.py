"""Generic introspector — the default renderer for composite values.

Output shape::

    OBJECT pkg.Child EXTENDS pkg.Parent IMPLEMENTS pkg.Mixin {
        PRIVATE INT $__secret = 1;

        PROTECTED STR $_name = 'x';

        PUBLIC LIST $items = SEQUENCE [
            ...
        ];
    }

Fields are emitted in three passes (private, protected, public) no matter
how they were declared; every pass is followed by a blank line, and the
trailing blank lines are folded before the closing brace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typedump.domain.fields import VISIBILITY_ORDER, TypeMetadata, type_metadata, walk_fields

if TYPE_CHECKING:
    from typedump.engine.dumper import Dumper


def object_header(meta: TypeMetadata) -> str:
    """``OBJECT name [EXTENDS parent ][IMPLEMENTS a, b ]{``"""
    parts = [f"OBJECT {meta.name} "]
    if meta.parent:
        parts.append(f"EXTENDS {meta.parent} ")
    if meta.capabilities:
        parts.append(f"IMPLEMENTS {', '.join(meta.capabilities)} ")
    parts.append("{")
    return "".join(parts)


class GenericIntrospector:
    """Walk a composite's fields and render each one recursively."""

    def render(self, value: Any, depth: int, dumper: Dumper) -> str:
        meta = type_metadata(type(value))
        fields = walk_fields(value)
        pad = dumper.indent(depth + 1)

        result = dumper.indent(depth) + object_header(meta) + "\n"

        for visibility in VISIBILITY_ORDER:
            for field in fields:
                if field.visibility is not visibility:
                    continue
                key = f"{field.visibility} {field.declared_type}".upper() + f" ${field.name}"
                rendered = dumper.render(field.value, depth + 1).strip()
                result += f"{pad}{key} = {rendered};\n"
            result += "\n"

        result = result.rstrip() + "\n"
        return result + dumper.indent(depth) + "}\n"

    def __repr__(self) -> str:
        return "GenericIntrospector()"
