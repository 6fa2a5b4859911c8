"""
Railway Database - JSON blobs over a key-value store

Every blob lives under one of three fixed keys. Reads fall back to the
caller's default when the key is missing or the blob cannot be decoded;
writes report success as a bool. Neither direction raises.
"""

from enum import StrEnum
from typing import Any, Optional

import orjson
from redis.exceptions import RedisError

from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.platform.state.kv_store import IKeyValueStore


class StorageKey(StrEnum):
    TRAINS = 'railway_trains'
    BOOKINGS = 'railway_bookings'
    USERS = 'railway_users'


_STORAGE_ERRORS = (OSError, ValueError, TypeError, RedisError)


class RailwayDatabase:
    def __init__(self, *, store: IKeyValueStore) -> None:
        self.store = store

    def save(self, key: StorageKey, data: Any) -> bool:
        try:
            payload = orjson.dumps(data).decode('utf-8')
            self.store.set_item(key, payload)
            return True
        except _STORAGE_ERRORS as e:
            # orjson.JSONEncodeError subclasses TypeError
            Logger.base.error(f'💥 [DATABASE] Save error for {key}: {type(e).__name__}: {e}')
            return False

    def load(self, key: StorageKey, default: Optional[Any] = None) -> Any:
        if default is None:
            default = []
        try:
            raw = self.store.get_item(key)
            return orjson.loads(raw) if raw else default
        except _STORAGE_ERRORS as e:
            # orjson.JSONDecodeError subclasses ValueError
            Logger.base.error(f'💥 [DATABASE] Load error for {key}: {type(e).__name__}: {e}')
            return default

    def clear(self) -> bool:
        cleared = True
        for key in StorageKey:
            try:
                self.store.remove_item(key)
            except _STORAGE_ERRORS as e:
                Logger.base.error(f'💥 [DATABASE] Clear error for {key}: {type(e).__name__}: {e}')
                cleared = False
        return cleared
