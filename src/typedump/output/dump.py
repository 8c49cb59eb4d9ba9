"""Consumer helpers: dump to a string or to the terminal.

These wrap ``Dumper.render(value, 0)`` with an optional call trail and a
border titled with the caller's location.  They never look inside the
rendered text.
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import TYPE_CHECKING, Any

from typedump.output.border import add_border
from typedump.output.console import print_dump

if TYPE_CHECKING:
    from typedump.engine.dumper import Dumper

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


def _is_internal(filename: str) -> bool:
    try:
        return Path(filename).resolve().is_relative_to(_PACKAGE_DIR)
    except (OSError, ValueError):
        return False


def call_trail() -> list[str]:
    """``file:line`` for every frame outside typedump, innermost first."""
    frames = traceback.extract_stack()
    return [
        f"{frame.filename}:{frame.lineno}"
        for frame in reversed(frames)
        if not _is_internal(frame.filename)
    ]


def dump(
    value: Any,
    *,
    return_as_string: bool = False,
    include_call_trail: bool = False,
    include_border: bool = True,
    title: str | None = None,
    dumper: Dumper | None = None,
    color: bool = True,
) -> str | None:
    """Render *value* and either return or print the result.

    Args:
        value: Anything.
        return_as_string: Return the text instead of printing it.
        include_call_trail: Append a ``BACKTRACE:`` section listing the call sites.
        include_border: Box the output, titled with the caller's ``file:line``.
        title: Border title override.
        dumper: Dumper to use; defaults to the process-wide one.
        color: Highlight keywords when printing to a terminal.
    """
    if dumper is None:
        from typedump.api import get_dumper

        dumper = get_dumper()

    trail = call_trail()
    text = dumper.render(value)

    if include_call_trail:
        text += "\nBACKTRACE:\n" + "\n".join(trail) + "\n"

    if include_border:
        if title is None:
            title = trail[0] if trail else ""
        text = add_border(text, title)

    if return_as_string:
        return text

    print_dump(text, color=color)
    return None


def dp(*items: Any, dumper: Dumper | None = None) -> None:
    """Print all *items* as one bordered sequence dump."""
    dump(items, dumper=dumper)
