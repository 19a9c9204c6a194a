"""Config file discovery.

Walk-up finder locates agecalc.toml starting from the working directory.
The AGECALC_CONFIG env var and the --config CLI flag take precedence.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "agecalc.toml"
CONFIG_ENV_VAR = "AGECALC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest agecalc.toml at or above *start* (default: cwd).

    When AGECALC_CONFIG is set it wins outright: its path is returned if
    it names a file, otherwise no config is used at all.
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
