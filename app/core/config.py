"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support.
"""

from functools import lru_cache

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import CACHE_TTL_PLACEHOLDER, CACHE_TTL_RECORDS


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Everything has a development default: SQLite through aiosqlite and no
    cache. Set CACHE_TYPE=memory or CACHE_TYPE=redis to enable the cache.
    """

    # App
    app_name: str = "rbac-admin"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./admin.db"
    database_echo: bool = False
    # Create tables on startup (development / SQLite); production uses managed schema.
    database_create_tables: bool = True
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Cache: "memory", "redis", or empty/unrecognized to disable
    cache_type: str = ""
    cache_ttl_records: int = CACHE_TTL_RECORDS
    cache_ttl_placeholder: int = CACHE_TTL_PLACEHOLDER
    cache_memory_max_entries: int = 10_000

    # Redis (used when cache_type == "redis")
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_socket_timeout: float = 5.0

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("cache_type")
    @classmethod
    def normalize_cache_type(cls, value: str) -> str:
        return value.strip().lower()

    @model_validator(mode="after")
    def validate_ttls(self) -> "Settings":
        """Cache TTLs must be positive; expiry of 0 would mean 'never' in some backends."""
        if self.cache_ttl_records <= 0:
            raise ValueError("CACHE_TTL_RECORDS must be a positive number of seconds")
        if self.cache_ttl_placeholder <= 0:
            raise ValueError("CACHE_TTL_PLACEHOLDER must be a positive number of seconds")
        if not self.database_url:
            raise ValueError("DATABASE_URL is required. Set in environment or .env file.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
