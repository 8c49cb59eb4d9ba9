"""Subcommand modules for typedump.

Provides register_commands() which uses deferred imports to keep
``typedump --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from typedump.commands.renderers import renderers
    from typedump.commands.show import show

    cli.add_command(show)
    cli.add_command(renderers)
