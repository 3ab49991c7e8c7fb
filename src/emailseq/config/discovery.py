"""Config file discovery.

The service reads ``emailseq.toml`` from the working directory or the
nearest ancestor that has one. ``EMAILSEQ_CONFIG`` pins an explicit file
(container deployments mount it somewhere unrelated to the cwd).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "emailseq.toml"
CONFIG_ENV_VAR = "EMAILSEQ_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A set but missing ``EMAILSEQ_CONFIG`` yields None rather than falling
    back to the walk-up search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
