"""Cache store factory: selects the backend from settings."""

from __future__ import annotations

import logging

import redis.asyncio as redis

from app.core.config import Settings
from app.core.constants import CACHE_TYPE_MEMORY, CACHE_TYPE_REDIS
from app.infrastructure.cache.cache_protocol import CacheStore
from app.infrastructure.cache.memory_cache import MemoryCache
from app.infrastructure.cache.redis_cache import RedisCache

logger = logging.getLogger(__name__)


async def create_cache_store(
    settings: Settings, redis_client: redis.Redis | None = None
) -> CacheStore | None:
    """Build and connect the cache store selected by settings.cache_type.

    Returns None when caching is disabled (empty or unrecognized selector) or
    when Redis is selected but unreachable; repositories then read straight
    from the database.
    """
    cache_type = settings.cache_type
    if cache_type == CACHE_TYPE_MEMORY:
        logger.info("Cache backend: memory")
        return MemoryCache(
            placeholder_ttl=settings.cache_ttl_placeholder,
            max_entries=settings.cache_memory_max_entries,
        )
    if cache_type == CACHE_TYPE_REDIS:
        cache = RedisCache(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            password=(
                settings.redis_password.get_secret_value()
                if settings.redis_password
                else None
            ),
            socket_timeout=settings.redis_socket_timeout,
            placeholder_ttl=settings.cache_ttl_placeholder,
            redis_client=redis_client,
        )
        if await cache.connect():
            return cache
        await cache.close()
        logger.warning("Redis unreachable. Cache disabled.")
        return None
    if cache_type:
        logger.warning("Unknown cache type %r. Cache disabled.", cache_type)
    else:
        logger.info("Cache disabled")
    return None
