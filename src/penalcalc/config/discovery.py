"""Locate penalcalc.toml.

Lookup order: the PENALCALC_CONFIG env var, then a walk up the directory
tree from *start* (like git looking for .git/). The walk stops at the
filesystem root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "penalcalc.toml"
CONFIG_ENV_VAR = "PENALCALC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest penalcalc.toml, or None.

    An env var pointing at a missing file yields None rather than
    falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
