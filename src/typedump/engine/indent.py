"""Indentation policy — the whitespace prefix for a nesting depth."""

from __future__ import annotations

from collections.abc import Callable

IndentFunction = Callable[[int], str]

DEFAULT_INDENT_WIDTH = 4


class IndentPolicy:
    """Default policy: ``level`` repetitions of a fixed-width blank unit."""

    def __init__(self, width: int = DEFAULT_INDENT_WIDTH) -> None:
        if width < 0:
            msg = f"Indent width must be >= 0, got {width}"
            raise ValueError(msg)
        self.width = width
        self._unit = " " * width

    def __call__(self, level: int) -> str:
        return self._unit * level

    def __repr__(self) -> str:
        return f"IndentPolicy(width={self.width})"
