"""Tests for RendererRegistry and the renderer base classes."""

from __future__ import annotations

from typing import Any

import pytest

from typedump.domain.errors import ConfigurationError
from typedump.engine.dumper import Dumper
from typedump.engine.registry import CallableRenderer, Renderer, RendererRegistry, TypeRenderer


class _Tag(TypeRenderer):
    def __init__(self, type_key: str, tag: str) -> None:
        super().__init__(type_key)
        self.tag = tag

    def render(self, value: Any, depth: int, dumper: Dumper) -> str:
        return dumper.indent(depth) + self.tag


class TestTypeRenderer:
    def test_type_key_is_stripped(self) -> None:
        assert _Tag("  pkg.Thing ", "t").type_key == "pkg.Thing"

    @pytest.mark.parametrize("key", ["", "   ", "\t\n"])
    def test_empty_key_rejected(self, key: str) -> None:
        with pytest.raises(ConfigurationError, match="cannot be empty"):
            _Tag(key, "t")

    def test_class_key(self) -> None:
        r = CallableRenderer(RendererRegistry, lambda v, d, dumper: "x")
        assert r.type_key == "typedump.engine.registry.RendererRegistry"

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            CallableRenderer("", lambda v, d, dumper: "x")

    def test_satisfies_protocol(self) -> None:
        assert isinstance(_Tag("k", "t"), Renderer)


class TestRendererRegistry:
    def test_register_and_get(self, registry: RendererRegistry) -> None:
        r = _Tag("integer", "I")
        registry.register("integer", r)
        assert registry.get("integer") is r
        assert "integer" in registry
        assert len(registry) == 1

    def test_register_empty_key_rejected(self, registry: RendererRegistry) -> None:
        with pytest.raises(ConfigurationError):
            registry.register("  ", _Tag("x", "t"))
        assert len(registry) == 0

    def test_register_class_key(self, registry: RendererRegistry) -> None:
        r = _Tag("x", "t")
        registry.register(RendererRegistry, r)
        assert registry.get("typedump.engine.registry.RendererRegistry") is r

    def test_reregistration_replaces_in_place(self, registry: RendererRegistry) -> None:
        a, b, c = _Tag("a", "1"), _Tag("b", "2"), _Tag("a", "3")
        registry.register("a", a)
        registry.register("b", b)
        registry.register("a", c)
        assert registry.list_registered() == [("a", c), ("b", b)]

    def test_unregister_is_idempotent(self, registry: RendererRegistry) -> None:
        registry.register("a", _Tag("a", "1"))
        registry.unregister("a")
        registry.unregister("a")
        assert registry.list_registered() == []

    def test_composite_entries_skip_kind_tags(self, registry: RendererRegistry) -> None:
        registry.register("integer", _Tag("integer", "i"))
        registry.register("object", _Tag("object", "o"))
        registry.register("pkg.A", _Tag("pkg.A", "a"))
        assert [key for key, _ in registry.composite_entries()] == ["pkg.A"]

    def test_fallback(self, registry: RendererRegistry) -> None:
        assert registry.fallback is None
        r = _Tag("object", "o")
        registry.register("object", r)
        assert registry.fallback is r

    def test_reset(self, registry: RendererRegistry) -> None:
        registry.register("a", _Tag("a", "1"))
        registry.reset()
        assert len(registry) == 0

    def test_registries_are_independent(self) -> None:
        one, two = RendererRegistry(), RendererRegistry()
        one.register("a", _Tag("a", "1"))
        assert "a" not in two

    def test_registration_logged(
        self, registry: RendererRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("DEBUG", logger="typedump.engine.registry"):
            registry.register("a", _Tag("a", "1"))
        assert any("Registered renderer for a" in r.getMessage() for r in caplog.records)
