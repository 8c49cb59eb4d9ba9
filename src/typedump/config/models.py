"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, typedump.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- typedump.toml sections ---


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    indent_width: int = Field(default=4, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    border: bool = True
    color: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    builtins: bool = True
    local_dir: str = ".typedump/plugins"
