"""Renderer registry — type key to renderer lookup table.

Keys are either value-kind tags (``"integer"``, ``"mapping"``, ...), the
composite fallback tag ``"object"``, or fully-qualified class names.
Insertion order is significant: the resolver walks composite entries in
registration order, and re-registering an existing key replaces the
renderer without moving the entry.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from typedump.domain.values import COMPOSITE_FALLBACK_KEY, KIND_KEYS, normalize_type_key

if TYPE_CHECKING:
    from typedump.engine.dumper import Dumper

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderer(Protocol):
    """Anything that turns one value into its textual dump.

    *dumper* is the shared entry point to use for nested members; a
    renderer must not keep per-render state of its own.
    """

    def render(self, value: Any, depth: int, dumper: Dumper) -> str: ...


class TypeRenderer(ABC):
    """Base class for renderers bound to a single type key.

    Raises:
        ConfigurationError: If *type_key* is empty or whitespace.
    """

    def __init__(self, type_key: str | type) -> None:
        self._type_key = normalize_type_key(type_key)

    @property
    def type_key(self) -> str:
        return self._type_key

    @abstractmethod
    def render(self, value: Any, depth: int, dumper: Dumper) -> str:
        """Return the dump of *value* at *depth*."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._type_key!r})"


class CallableRenderer(TypeRenderer):
    """Adapt a plain ``func(value, depth, dumper) -> str`` into a renderer."""

    def __init__(
        self,
        type_key: str | type,
        func: Callable[[Any, int, Dumper], str],
    ) -> None:
        super().__init__(type_key)
        self._func = func

    def render(self, value: Any, depth: int, dumper: Dumper) -> str:
        return self._func(value, depth, dumper)


class RendererRegistry:
    """Ordered mapping of type keys to renderers.

    Usage::

        registry = RendererRegistry()
        registry.register("decimal.Decimal", DecimalRenderer())
        registry.register(datetime.date, DateRenderer())  # class keys are converted
    """

    def __init__(self) -> None:
        self._renderers: dict[str, Renderer] = {}

    def register(self, type_key: str | type, renderer: Renderer) -> None:
        """Insert or replace the renderer for *type_key*.

        Raises:
            ConfigurationError: If *type_key* is empty or whitespace.
        """
        key = normalize_type_key(type_key)
        replaced = key in self._renderers
        self._renderers[key] = renderer
        logger.debug("%s renderer for %s: %r", "Replaced" if replaced else "Registered", key, renderer)

    def unregister(self, type_key: str | type) -> None:
        """Remove the renderer for *type_key*; a missing key is ignored."""
        key = normalize_type_key(type_key)
        if self._renderers.pop(key, None) is not None:
            logger.debug("Unregistered renderer for %s", key)

    def get(self, type_key: str) -> Renderer | None:
        """Return the renderer registered under exactly *type_key*."""
        return self._renderers.get(type_key)

    def list_registered(self) -> list[tuple[str, Renderer]]:
        """All ``(type_key, renderer)`` pairs in registration order."""
        return list(self._renderers.items())

    def composite_entries(self) -> Iterator[tuple[str, Renderer]]:
        """Entries keyed by class name (not kind tags), in registration order."""
        for key, renderer in self._renderers.items():
            if key not in KIND_KEYS:
                yield key, renderer

    @property
    def fallback(self) -> Renderer | None:
        """Renderer registered for composites with no better match."""
        return self._renderers.get(COMPOSITE_FALLBACK_KEY)

    def reset(self) -> None:
        """Remove every registered renderer."""
        self._renderers.clear()

    def __contains__(self, type_key: object) -> bool:
        return type_key in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)
