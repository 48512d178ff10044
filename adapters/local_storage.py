"""Key-value storage used by demo mode.

Mirrors the browser ``localStorage`` contract: string values addressed by a
string key, synchronous reads and writes, no cross-process locking.
"""

from typing import Dict, Optional
from abc import ABC, abstractmethod
from pathlib import Path
import logging
import os
import re
import tempfile

logger = logging.getLogger("menufy.local_storage")

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStorage(ABC):
    """String key → string value store"""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored text or None when the key was never written."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Replace the value stored under ``key``."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Forget ``key``; missing keys are ignored."""


class InMemoryStorage(KeyValueStorage):
    """Process-local storage, used by tests and ephemeral deployments."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """One ``<key>.json`` file per key inside ``directory``.

    Writes go to a temporary file that is then renamed over the target, so a
    reader never sees a half-written value. Concurrent writers are
    last-write-wins.
    """

    def __init__(self, directory: str):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.directory), prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except OSError:
            logger.exception("Failed writing %s", path)
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
