from enum import StrEnum
from pathlib import Path

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from railway_booking.platform.constant.path import BASE_DIR, DATA_DIR


_ENV_PATH = BASE_DIR / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (BASE_DIR / '.env.example')


class StorageBackend(StrEnum):
    MEMORY = 'memory'
    FILE = 'file'
    KVROCKS = 'kvrocks'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Railway Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables io tracing and the file log sink
    SERVICE_NAME: str = 'railway_booking'

    # Key-value store
    STORAGE_BACKEND: StorageBackend = StorageBackend.FILE
    STORAGE_DIR: Path = DATA_DIR

    @field_validator('STORAGE_BACKEND', mode='before')
    @classmethod
    def normalize_storage_backend(cls, v: str | StorageBackend) -> str | StorageBackend:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Kvrocks Configuration (Redis protocol + Kvrocks storage)
    KVROCKS_HOST: str = 'localhost'
    KVROCKS_PORT: int = 6666
    KVROCKS_DB: int = 0
    KVROCKS_PASSWORD: SecretStr = SecretStr('')
    KVROCKS_KEY_PREFIX: str = ''
    KVROCKS_SOCKET_TIMEOUT: int = 10  # Socket read/write timeout (seconds)
    KVROCKS_SOCKET_CONNECT_TIMEOUT: int = 10  # Connection timeout (seconds)


settings = Settings()  # type: ignore
