"""Cache: store backends, per-entity cache and the cache-aside record loader.

Used by repositories for id lookups. Key format is in keys.py (DRY); the
backend is chosen by factory.create_cache_store from settings.
"""

from app.infrastructure.cache.cache_protocol import CacheStore
from app.infrastructure.cache.entity_cache import EntityCache
from app.infrastructure.cache.factory import create_cache_store
from app.infrastructure.cache.keys import record_key, validate_prefix
from app.infrastructure.cache.memory_cache import MemoryCache
from app.infrastructure.cache.record_loader import (
    CacheErrorHook,
    RecordLoader,
    log_cache_error,
)
from app.infrastructure.cache.redis_cache import RedisCache
from app.infrastructure.cache.singleflight import SingleFlightGroup

__all__ = [
    "CacheErrorHook",
    "CacheStore",
    "EntityCache",
    "MemoryCache",
    "RecordLoader",
    "RedisCache",
    "SingleFlightGroup",
    "create_cache_store",
    "log_cache_error",
    "record_key",
    "validate_prefix",
]
