"""Shared pytest fixtures for typedump tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from typedump.api import reset_dumper
from typedump.engine.dumper import Dumper
from typedump.engine.registry import RendererRegistry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> Generator[RendererRegistry]:
    """Fresh, empty renderer registry; reset after the test."""
    reg = RendererRegistry()
    try:
        yield reg
    finally:
        reg.reset()


@pytest.fixture
def dumper(registry: RendererRegistry) -> Dumper:
    """Dumper over the test's registry with the default 4-space indent."""
    return Dumper(registry)


@pytest.fixture(autouse=True)
def _isolate_process_state(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Keep config discovery, the default dumper, and logging handlers test-local."""
    monkeypatch.setenv("TYPEDUMP_CONFIG", str(tmp_path / "absent.toml"))
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    td = logging.getLogger("typedump")
    td_level = td.level
    reset_dumper()
    yield
    reset_dumper()
    root.handlers = original_handlers
    root.setLevel(original_level)
    td.setLevel(td_level)
