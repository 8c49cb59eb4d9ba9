"""Root CLI group for typedump with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from typedump import __version__
from typedump.commands import register_commands
from typedump.commands._base import DumpGroup
from typedump.commands._context import AppContext
from typedump.config.settings import TypedumpSettings


@click.group(
    cls=DumpGroup,
    invoke_without_command=True,
    examples="""\
  typedump show config.toml
  typedump --indent-width 2 show data.json
  typedump -v --log-json renderers""",
)
@click.version_option(version=__version__, prog_name="typedump")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--indent-width", type=click.IntRange(min=0), default=None, help="Spaces per nesting level.")
@click.option("--no-plugins", is_flag=True, help="Skip plugin discovery (built-ins stay).")
@click.option("--no-color", is_flag=True, help="Disable highlighting.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    indent_width: int | None,
    no_plugins: bool,
    no_color: bool,
) -> None:
    """typedump — indented debug dumps of structured data."""
    ctx.ensure_object(dict)
    overrides: dict[str, Any] = {"verbose": verbose, "log_json": log_json}
    if indent_width is not None:
        overrides["render"] = {"indent_width": indent_width}
    if no_plugins:
        overrides["plugins"] = {"enabled": False}
    if no_color:
        overrides["output"] = {"color": False}

    settings = TypedumpSettings.from_cli(config_path=config_path, **overrides)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
