from pathlib import Path
from typing import Annotated, List, Optional

import orjson
from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Flight Booking System'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    LOG_DIR: str = str(_PROJECT_ROOT / 'logs')  # Rotated files are only written when DEBUG

    # CORS
    # comma separated or a JSON list; NoDecode hands the raw string to the validator
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return orjson.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'flight_booking'
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None  # Overrides the POSTGRES_* URL (e.g. sqlite+aiosqlite)

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Database pool
    DB_POOL_SIZE: int = 20
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 3600  # seconds
    DB_POOL_PRE_PING: bool = True

    # Redis (search result cache)
    REDIS_HOST: str = 'localhost'
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: str = ''
    REDIS_DECODE_RESPONSES: bool = True
    REDIS_POOL_MAX_CONNECTIONS: int = 50
    REDIS_POOL_SOCKET_TIMEOUT: int = 5  # seconds
    REDIS_POOL_SOCKET_CONNECT_TIMEOUT: int = 5  # seconds
    REDIS_POOL_HEALTH_CHECK_INTERVAL: int = 30  # seconds

    # Flight search
    SEARCH_CACHE_ENABLED: bool = True
    SEARCH_CACHE_BACKEND: str = 'redis'  # redis | memory
    SEARCH_CACHE_TTL_SECONDS: int = 300
    FLIGHT_CACHE_TTL_SECONDS: int = 1800
    SEARCH_CACHE_FAIL_OPEN: bool = False  # True: cache I/O errors are logged and treated as a miss
    SEARCH_REFERENCE_TIMEZONE: Optional[str] = None  # None: server local time
    SEARCH_DEFAULT_LIMIT: int = 20
    SEARCH_MAX_LIMIT: int = 100

    # Flight lifecycle
    SCHEDULE_CHANGE_TOLERANCE_HOURS: float = 2.0


settings = Settings()  # type: ignore
