"""Client-local key-value storage for UI preferences.

A single JSON object in ``{state_dir}/preferences.json``. The theme
lives under the fixed key ``theme``; unknown keys written by other
versions are preserved on save.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from agecalc.domain.types import Theme

logger = logging.getLogger(__name__)

PREFERENCES_FILENAME = "preferences.json"
THEME_KEY = "theme"


class PreferenceStore:
    """JSON-file-backed key-value store.

    A missing, unreadable or non-object file reads as empty; it is
    replaced wholesale on the next write.
    """

    def __init__(self, state_dir: Path) -> None:
        self.path = state_dir / PREFERENCES_FILENAME

    def load(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring non-object preferences file %s", self.path)
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self.load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self.load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        logger.debug("Saved preference %s=%r to %s", key, value, self.path)


def read_theme(store: PreferenceStore, default: Theme = Theme.LIGHT) -> Theme:
    """Stored theme, or *default* when absent or not a known theme."""
    raw = store.get(THEME_KEY)
    try:
        return Theme(raw)
    except ValueError:
        return default


def write_theme(store: PreferenceStore, theme: Theme) -> None:
    store.set(THEME_KEY, str(theme))
