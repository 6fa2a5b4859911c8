from typing import Optional

from redis import Redis

from railway_booking.platform.config.core_setting import Settings, settings as default_settings
from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.platform.state.kv_store import IKeyValueStore


class KvrocksKeyValueStore(IKeyValueStore):
    """
    Kvrocks-backed store (Redis protocol).

    Usage:
        store = KvrocksKeyValueStore()                       # module settings
        store = KvrocksKeyValueStore(settings=my_settings)   # injected settings
        store = KvrocksKeyValueStore(client=redis_obj)       # injected client
    """

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        client: Optional[Redis] = None,
        key_prefix: Optional[str] = None,
    ) -> None:
        config = settings if settings is not None else default_settings
        self._client = client if client is not None else self._build_client(config)
        self._key_prefix = config.KVROCKS_KEY_PREFIX if key_prefix is None else key_prefix

    @property
    def client(self) -> Redis:
        return self._client

    @staticmethod
    def _build_client(config: Settings) -> Redis:
        password = config.KVROCKS_PASSWORD.get_secret_value()
        client = Redis(
            host=config.KVROCKS_HOST,
            port=config.KVROCKS_PORT,
            db=config.KVROCKS_DB,
            password=password or None,
            decode_responses=True,
            socket_timeout=config.KVROCKS_SOCKET_TIMEOUT,
            socket_connect_timeout=config.KVROCKS_SOCKET_CONNECT_TIMEOUT,
        )
        Logger.base.info(
            f'🔌 [KVROCKS] Client created for {config.KVROCKS_HOST}:{config.KVROCKS_PORT}'
            f'/{config.KVROCKS_DB}'
        )
        return client

    def _key(self, key: str) -> str:
        return f'{self._key_prefix}{key}'

    def get_item(self, key: str) -> Optional[str]:
        value = self._client.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode('utf-8')
        return value

    def set_item(self, key: str, value: str) -> None:
        self._client.set(self._key(key), value)

    def remove_item(self, key: str) -> None:
        self._client.delete(self._key(key))
