"""Locate ``fieldrules.toml``.

``FIELDRULES_CONFIG`` names the file outright; otherwise the search walks
up from the starting directory to the filesystem root, the way git finds
its ``.git`` directory.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "fieldrules.toml"
CONFIG_ENV_VAR = "FIELDRULES_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``FIELDRULES_CONFIG`` pointing at a missing file disables discovery
    instead of falling back to the walk-up search.
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
