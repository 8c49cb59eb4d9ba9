"""Rich Console factory and theme for typedump output.

Dumps are plain text.  Styling is layered on at print time: the text is
highlighted into a StringIO-backed console and the captured ANSI output
is handed to ``click.echo``, which drops it again for non-TTY streams.
"""

from __future__ import annotations

from io import StringIO
from typing import TextIO

import click
from rich.console import Console
from rich.text import Text
from rich.theme import Theme

TYPEDUMP_THEME = Theme(
    {
        "dump.border": "dim",
        "dump.keyword": "bold cyan",
        "dump.private": "red",
        "dump.protected": "yellow",
        "dump.public": "green",
        "dump.literal": "magenta",
        "dump.text": "green",
        "dump.opaque": "bold red",
        "dump.trail": "dim",
    }
)

_HIGHLIGHTS: tuple[tuple[str, str], ...] = (
    (r"(?m)^\+.*\+$", "dump.border"),
    (r"(?m)^\|  |  \|$", "dump.border"),
    (r"\b(OBJECT|EXTENDS|IMPLEMENTS|SEQUENCE|MAPPING)\b", "dump.keyword"),
    (r"\bPRIVATE\b", "dump.private"),
    (r"\bPROTECTED\b", "dump.protected"),
    (r"\bPUBLIC\b", "dump.public"),
    (r"\b(NULL|TRUE|FALSE)\b", "dump.literal"),
    (r"'[^'\n]*'", "dump.text"),
    (r"\bOPAQUE\b", "dump.opaque"),
    (r"(?m)^BACKTRACE:$", "dump.trail"),
)


def create_console(
    *,
    no_color: bool = False,
    width: int | None = None,
    force_terminal: bool | None = None,
) -> Console:
    """Create a themed Console that renders into a StringIO buffer.

    Args:
        no_color: Drop styling entirely.
        width: Console width; soft wrapping means it only bounds Rich's own layout.
        force_terminal: Emit ANSI codes even though the buffer is not a TTY.
    """
    return Console(
        file=StringIO(),
        theme=TYPEDUMP_THEME,
        no_color=no_color,
        force_terminal=force_terminal,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Return everything written to a :func:`create_console` buffer."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def styled_dump(text: str) -> Text:
    """Return *text* as a Rich ``Text`` with dump keywords highlighted."""
    styled = Text(text)
    for pattern, style in _HIGHLIGHTS:
        styled.highlight_regex(pattern, style=style)
    return styled


def render_dump(text: str, *, color: bool = True) -> str:
    """Return *text* with ANSI highlighting, or unchanged when *color* is off."""
    if not color:
        return text
    console = create_console(force_terminal=True)
    console.print(styled_dump(text), end="", soft_wrap=True)
    return get_output(console)


def print_dump(text: str, *, color: bool = True, file: TextIO | None = None) -> None:
    """Write a finished dump to *file* (default: stdout).

    ``click.echo`` strips the highlighting again when *file* is not a
    terminal, so pipes and captured output always get the plain dump.
    """
    click.echo(render_dump(text, color=color), file=file, nl=False)
