"""Command: dump the contents of a JSON or TOML file."""

from __future__ import annotations

import json
import tomllib
from typing import IO, TYPE_CHECKING, Any

import click

from typedump.commands._base import DumpCommand

if TYPE_CHECKING:
    from typedump.commands._context import AppContext

_SUFFIX_FORMATS = {".json": "json", ".toml": "toml"}


def _detect_format(name: str, requested: str) -> str:
    if requested != "auto":
        return requested
    for suffix, fmt in _SUFFIX_FORMATS.items():
        if name.lower().endswith(suffix):
            return fmt
    return "json"


def _parse(raw: str, fmt: str) -> Any:
    if fmt == "toml":
        return tomllib.loads(raw)
    return json.loads(raw)


@click.command(
    cls=DumpCommand,
    examples="""\
  typedump show pyproject.toml
  typedump show data.json --no-border
  cat payload.json | typedump show - --format json --title payload""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["auto", "json", "toml"]),
    default="auto",
    show_default=True,
    help="Input format; auto picks by file extension and falls back to JSON.",
)
@click.option(
    "--border/--no-border",
    default=None,
    help="Box the dump (default from [output] border).",
)
@click.option("--title", default=None, help="Border title (default: the file name).")
@click.pass_obj
def show(app: AppContext, source: IO[str], fmt: str, border: bool | None, title: str | None) -> None:
    """Parse SOURCE and print its dump (use - for stdin)."""
    name = getattr(source, "name", "-")
    fmt = _detect_format(name, fmt)
    raw = source.read()
    try:
        value = _parse(raw, fmt)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot parse {name} as {fmt.upper()}: {exc}"
        raise click.ClickException(msg) from exc

    text = app.dumper.render(value)

    if border is None:
        border = app.settings.output.border
    if border:
        from typedump.output.border import add_border

        text = add_border(text, title if title is not None else name)

    app.emit(text)
