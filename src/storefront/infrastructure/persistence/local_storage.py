"""File-backed string key-value store for device-local state.

Holds small per-device values (the cart, the logged-in session) as
strings under fixed keys in a single JSON object on disk.  An unreadable
file reads as empty; writes replace the file through a temporary sibling
so a crash never leaves half-written JSON behind.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalStorage:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*.  Raises OSError if the file can't be written."""
        entries = self._load()
        entries[key] = value
        self._persist(entries)

    def remove(self, key: str) -> None:
        entries = self._load()
        if entries.pop(key, None) is not None:
            self._persist(entries)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable storage file %s: %s", self._file_path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: not a JSON object", self._file_path)
            return {}
        return data

    def _persist(self, entries: dict[str, str]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(entries, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)
