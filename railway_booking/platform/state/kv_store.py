"""
Key-value stores holding the persisted JSON blobs.

Every backend speaks the same three-call protocol (get / set / remove on
string keys and string values). Backends raise their native errors; callers
decide whether a failure is fatal.
"""

from abc import ABC, abstractmethod
import os
from pathlib import Path
import re
from typing import Dict, Optional

from railway_booking.platform.logging.loguru_io import Logger


class IKeyValueStore(ABC):
    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent"""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove the key; absent keys are ignored"""
        pass


class InMemoryKeyValueStore(IKeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


_SAFE_KEY = re.compile(r'^[A-Za-z0-9_.-]+$')


class FileKeyValueStore(IKeyValueStore):
    """
    One file per key under a directory.

    Writes go to a sibling temp file first and are moved into place, so a
    crash mid-write leaves the previous blob intact.
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f'Invalid storage key: {key!r}')
        return self._directory / f'{key}.json'

    def get_item(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding='utf-8')

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        self._directory.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix('.json.tmp')
        try:
            tmp_path.write_text(value, encoding='utf-8')
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        Logger.base.debug(f'💾 [STORE] Wrote {len(value)} chars to {path}')

    def remove_item(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)
