"""Tests for TypedumpSettings: CLI overrides, env vars, and the TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from typedump.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from typedump.config.settings import TypedumpSettings


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TypedumpSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.render.indent_width == 4
        assert settings.output.border is True
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TypedumpSettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_discovered_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / CONFIG_FILENAME
        toml.write_text("[render]\nindent_width = 2\n[output]\nborder = false\n")
        settings = TypedumpSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml.resolve()
        assert settings.render.indent_width == 2
        assert settings.output.border is False
        assert settings.output.color is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        toml = tmp_path / "other.toml"
        toml.write_text("[plugins]\nbuiltins = false\n")
        settings = TypedumpSettings.from_cli(config_path=toml, start=tmp_path)
        assert settings.plugins.builtins is False

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = TypedumpSettings.from_cli(config_path=tmp_path / "nope.toml")
        assert settings.config_path is None
        assert settings.render.indent_width == 4

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[render\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TypedumpSettings.from_cli(start=tmp_path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[render]\nindent_width = -2\n")
        with pytest.raises(ValidationError):
            TypedumpSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[render]\nindent_width = 2\n")
        monkeypatch.setenv("TYPEDUMP_RENDER__INDENT_WIDTH", "8")
        assert TypedumpSettings.from_cli(start=tmp_path).render.indent_width == 8

    def test_overrides_beat_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPEDUMP_VERBOSE", "false")
        settings = TypedumpSettings.from_cli(start=tmp_path, verbose=True)
        assert settings.verbose is True

    def test_nested_override_merges_with_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[output]\nborder = false\ncolor = false\n")
        settings = TypedumpSettings.from_cli(start=tmp_path, output={"color": True})
        assert settings.output.color is True
        assert settings.output.border is False
