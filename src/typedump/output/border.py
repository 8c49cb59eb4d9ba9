"""Box drawing around a finished dump.

The dump is treated as an opaque block of lines; nothing here knows
about values or renderers.
"""

from __future__ import annotations

BORDER_MARGIN = 4


def _pad_both(text: str, width: int, fill: str) -> str:
    total = max(width - len(text), 0)
    left = total // 2
    return fill * left + text + fill * (total - left)


def add_border(text: str, title: str = "") -> str:
    """Wrap *text* in a ``+---+`` box, optionally titled.

    The box is ``max(len(title), longest line) + 4`` characters wide
    (excluding the corner characters).  A blank line is inserted above
    the content.
    """
    lines = ["", *text.split("\n")]
    title = title.strip()
    width = max(len(title), *(len(line) for line in lines)) + BORDER_MARGIN

    output = "\n"
    if title:
        output += "+" + _pad_both(f" {title} ", width, "-") + "+\n"
    else:
        output += "\n+" + "-" * width + "+\n"

    for line in lines:
        output += "|  " + line.ljust(width - BORDER_MARGIN) + "  |\n"

    output += "+" + "-" * width + "+\n"
    return output + "\n"
