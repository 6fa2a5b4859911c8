from railway_booking.platform.config.core_setting import Settings, StorageBackend
from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.platform.state.kv_store import (
    FileKeyValueStore,
    IKeyValueStore,
    InMemoryKeyValueStore,
)
from railway_booking.platform.state.kvrocks_client import KvrocksKeyValueStore


def build_key_value_store(*, settings: Settings) -> IKeyValueStore:
    backend = settings.STORAGE_BACKEND
    Logger.base.info(f'🗄️ [STORE] Using {backend.value} key-value store')

    if backend == StorageBackend.MEMORY:
        return InMemoryKeyValueStore()
    if backend == StorageBackend.KVROCKS:
        return KvrocksKeyValueStore(settings=settings)
    return FileKeyValueStore(settings.STORAGE_DIR)
