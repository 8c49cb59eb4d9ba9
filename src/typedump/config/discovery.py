"""Locate ``typedump.toml``.

``TYPEDUMP_CONFIG`` names the file outright; otherwise the nearest
``typedump.toml`` in the start directory or one of its parents wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "typedump.toml"
CONFIG_ENV_VAR = "TYPEDUMP_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``TYPEDUMP_CONFIG`` that points at a missing file disables the
    walk-up instead of falling back to it.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
