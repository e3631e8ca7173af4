"""Locate ``gunghap.toml``.

An explicit ``--config`` path wins, then ``GUNGHAP_CONFIG``, then the
nearest ``gunghap.toml`` in the start directory or any of its parents.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "gunghap.toml"
CONFIG_ENV_VAR = "GUNGHAP_CONFIG"


def find_config(start: Path | None = None, explicit: str | None = None) -> Path | None:
    """Return the config file to load, or None when there is none.

    A named file (*explicit* or ``GUNGHAP_CONFIG``) that does not exist
    means "no config"; the walk-up search is not attempted.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
