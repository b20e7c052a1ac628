"""
Persistence of the raw pasted text between sessions.

Values are kept in a small JSON file (key -> string), one key per app.
"""
import json
import logging
from pathlib import Path
from typing import Optional

import config

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the raw text could not be written or removed."""


class RawTextStore:
    def __init__(self, path=None, key: str = config.STORAGE_KEY):
        self.path = Path(path) if path is not None else config.STORAGE_PATH
        self.key = key

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring unexpected content in {self.path}")
            return {}
        return data

    def _write_all(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def load(self) -> Optional[str]:
        value = self._read_all().get(self.key)
        return value if isinstance(value, str) else None

    def save(self, text: str) -> None:
        data = self._read_all()
        data[self.key] = text
        self._write_all(data)
        logger.debug(f"Saved {len(text)} chars under '{self.key}'")

    def clear(self) -> None:
        data = self._read_all()
        if self.key not in data:
            return
        del data[self.key]
        self._write_all(data)
        logger.debug(f"Cleared '{self.key}'")
