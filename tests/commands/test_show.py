"""Tests for the show command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from typedump.cli import cli


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestShow:
    def test_json_without_border(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "data.json").write_text(json.dumps({"name": "x", "tags": ["a"]}))
        result = cli_runner.invoke(cli, ["--no-color", "show", "data.json", "--no-border"])
        assert result.exit_code == 0, result.output
        assert result.output == (
            "MAPPING [\n"
            "    ['name'] => 'x',\n"
            "    ['tags'] => SEQUENCE [\n"
            "        [0] => 'a'\n"
            "    ]\n"
            "]\n"
        )

    def test_toml_by_suffix(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "conf.toml").write_text("[a]\nb = 1\n")
        result = cli_runner.invoke(cli, ["--no-color", "show", "conf.toml", "--no-border"])
        assert result.exit_code == 0, result.output
        assert result.output == "MAPPING [\n    ['a'] => MAPPING [\n        ['b'] => 1\n    ]\n]\n"

    def test_explicit_format_overrides_suffix(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "data.txt").write_text("k = true\n")
        result = cli_runner.invoke(
            cli, ["--no-color", "show", "data.txt", "--format", "toml", "--no-border"]
        )
        assert result.output == "MAPPING [\n    ['k'] => TRUE\n]\n"

    def test_stdin_defaults_to_json(self, cli_runner: CliRunner, workdir: Path) -> None:
        result = cli_runner.invoke(cli, ["--no-color", "show", "-", "--no-border"], input="[null]")
        assert result.exit_code == 0, result.output
        assert result.output == "SEQUENCE [\n    [0] => NULL\n]\n"

    def test_indent_width_flag(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "data.json").write_text('{"a": 1}')
        result = cli_runner.invoke(
            cli, ["--no-color", "--indent-width", "2", "show", "data.json", "--no-border"]
        )
        assert result.output == "MAPPING [\n  ['a'] => 1\n]\n"

    def test_border_titled_with_file_name(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "d.json").write_text("1")
        result = cli_runner.invoke(cli, ["--no-color", "show", "d.json"])
        assert result.exit_code == 0, result.output
        assert result.output == (
            "\n+- d.json -+\n|          |\n|  1       |\n+----------+\n\n"
        )

    def test_custom_title(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "d.json").write_text("1")
        result = cli_runner.invoke(cli, ["--no-color", "show", "d.json", "--title", "T"])
        assert "+- T -+" in result.output

    def test_border_default_from_config(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "typedump.toml").write_text("[output]\nborder = false\n")
        (workdir / "d.json").write_text("1")
        result = cli_runner.invoke(cli, ["--no-color", "-c", "typedump.toml", "show", "d.json"])
        assert result.output == "1"

    def test_parse_error(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "bad.json").write_text("{nope")
        result = cli_runner.invoke(cli, ["--no-color", "show", "bad.json"])
        assert result.exit_code == 1
        assert "Cannot parse bad.json as JSON" in result.output

    def test_missing_file(self, cli_runner: CliRunner, workdir: Path) -> None:
        result = cli_runner.invoke(cli, ["show", "missing.json"])
        assert result.exit_code == 2

    def test_local_plugin_applies(self, cli_runner: CliRunner, workdir: Path) -> None:
        plugins = workdir / ".typedump" / "plugins"
        plugins.mkdir(parents=True)
        (plugins / "upper.py").write_text(
            "import pluggy\n"
            "from typedump.engine.registry import CallableRenderer\n"
            "hookimpl = pluggy.HookimplMarker('typedump')\n"
            "class Upper:\n"
            "    @hookimpl\n"
            "    def register_renderers(self):\n"
            "        return {'text': CallableRenderer('text', "
            "lambda v, d, dumper: dumper.indent(d) + v.upper())}\n"
        )
        (workdir / "d.json").write_text('"hi"')
        result = cli_runner.invoke(cli, ["--no-color", "show", "d.json", "--no-border"])
        assert result.output == "HI"

        result = cli_runner.invoke(
            cli, ["--no-color", "--no-plugins", "show", "d.json", "--no-border"]
        )
        assert result.output == "'hi'"
