"""
Key-value persistence backends.

The profile store only ever needs get/set/remove of JSON values by string
key. Backends own serialization, so a value read back is always a fresh
copy that callers may mutate freely.
"""

import json
import logging
import re
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    Interface for persisted JSON values.

    get() never raises for bad data: a missing key and an undecodable value
    both come back as None, the latter with a logged warning.
    """

    def get(self, key: str):
        raise NotImplementedError

    def set(self, key: str, value) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    @staticmethod
    def _decode(key: str, raw: Optional[str]):
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring malformed value for %r: %s", key, e)
            return None


class MemoryStore(KeyValueStore):
    """In-process store, used by tests and one-off sessions."""

    def __init__(self):
        self._data = {}

    def get(self, key: str):
        return self._decode(key, self._data.get(key))

    def set(self, key: str, value) -> None:
        self._data[key] = json.dumps(value)

    def set_raw(self, key: str, raw: str) -> None:
        """Store text as-is, bypassing serialization."""
        self._data[key] = raw

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list:
        return sorted(self._data)


class JsonFileStore(KeyValueStore):
    """
    One JSON file per key inside a directory.

    Writes go straight to the target file. There is no temp-file rename, so
    a crash mid-write can leave a truncated file; get() then treats it as
    absent.
    """

    _UNSAFE = re.compile(r"[^A-Za-z0-9_.-]")

    def __init__(self, directory):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{self._UNSAFE.sub('_', key)}.json"

    def get(self, key: str):
        filepath = self._path(key)
        if not filepath.exists():
            return None
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            logger.warning("Could not read %s: %s", filepath, e)
            return None
        return self._decode(key, raw)

    def set(self, key: str, value) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        filepath = self._path(key)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(value, f, indent=2)
        logger.debug("Wrote %s", filepath)

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
