"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Dumper construction and centralized
output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from typedump.config.settings import TypedumpSettings
    from typedump.engine.dumper import Dumper


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The dumper (and with it plugin discovery) is built on first use so
    ``--help`` and ``--version`` never import plugins.
    """

    def __init__(self, settings: TypedumpSettings) -> None:
        self.settings = settings
        self._dumper: Dumper | None = None

        from typedump.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def dumper(self) -> Dumper:
        """The configured Dumper (created lazily on first access)."""
        if self._dumper is None:
            from typedump.api import build_dumper
            from typedump.domain.errors import TypedumpError

            try:
                self._dumper = build_dumper(self.settings)
            except TypedumpError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._dumper

    def emit(self, text: str) -> None:
        """Write finished output to stdout, highlighted on a color terminal."""
        from typedump.output.console import print_dump

        print_dump(text, color=self.settings.output.color)
