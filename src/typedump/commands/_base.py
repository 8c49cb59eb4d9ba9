"""Click classes shared by every typedump command.

Each command may carry an ``examples`` block.  It is printed by an eager
``--examples`` flag, so ``--help`` stays short and the examples never go
out of sync with the command that owns them.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(examples, "  "))
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )


class _ExamplesMixin:
    """Accept ``examples=`` and expose it as ``--examples``."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples:
            self.params.append(_examples_option(self.examples))


class DumpCommand(_ExamplesMixin, click.Command):
    """A command with optional ``--examples``."""


class DumpGroup(_ExamplesMixin, click.Group):
    """A group whose subcommands default to :class:`DumpCommand`."""

    command_class = DumpCommand
