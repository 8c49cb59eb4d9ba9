"""Exception hierarchy for typedump.

Construction-time problems raise; rendering never does (opaque values
degrade to a textual fallback instead).
"""

from __future__ import annotations


class TypedumpError(Exception):
    """Base class for all typedump errors."""


class ConfigurationError(TypedumpError, ValueError):
    """A renderer was constructed or registered with an invalid type key."""
