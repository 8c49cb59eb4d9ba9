"""Command: list registered renderers in resolution order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typedump.commands._base import DumpCommand

if TYPE_CHECKING:
    from typedump.commands._context import AppContext


@click.command(
    cls=DumpCommand,
    examples="""\
  typedump renderers
  typedump --no-plugins renderers""",
)
@click.pass_obj
def renderers(app: AppContext) -> None:
    """List registered renderers (type key and renderer)."""
    entries = app.dumper.registry.list_registered()
    if not entries:
        click.echo("No renderers registered; every composite uses the generic introspector.")
        return

    width = max(len(key) for key, _ in entries)
    for key, renderer in entries:
        click.echo(f"{key.ljust(width)}  {renderer!r}")
