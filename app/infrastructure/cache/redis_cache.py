"""Redis-based cache store.

Async Redis cache with TTL support and the not-found placeholder. Values are
JSON-encoded strings; the placeholder is stored as a raw marker that can never
be produced by JSON encoding. Connection errors get one reconnect attempt,
then surface as CacheBackendError so the read path can propagate them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import redis.asyncio as redis

from app.core.constants import CACHE_PLACEHOLDER, CACHE_TTL_PLACEHOLDER
from app.infrastructure.exceptions import (
    CacheBackendError,
    CacheMissError,
    CachePlaceholderError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisCache:
    """Async Redis cache store.

    Call connect() at startup and close() at shutdown. A client passed in
    (tests, DI) is used as-is and never replaced on reconnect.
    """

    def __init__(
        self,
        *,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: str | None = None,
        socket_timeout: float = 5.0,
        placeholder_ttl: int = CACHE_TTL_PLACEHOLDER,
        redis_client: redis.Redis | None = None,
    ) -> None:
        """Initialize Redis cache store.

        Args:
            host: Redis host.
            port: Redis port.
            db: Redis database number.
            password: Optional password.
            socket_timeout: Connect and command timeout in seconds.
            placeholder_ttl: Expiry in seconds for not-found placeholders.
            redis_client: Optional Redis client for testing or DI.
        """
        self.host = host
        self.port = port
        self.db = db
        self._password = password
        self.socket_timeout = socket_timeout
        self.placeholder_ttl = placeholder_ttl
        self.redis = redis_client
        self._owns_client = redis_client is None

    def _new_client(self) -> redis.Redis:
        return redis.Redis(
            host=self.host,
            port=self.port,
            db=self.db,
            password=self._password,
            decode_responses=True,
            socket_connect_timeout=self.socket_timeout,
            socket_timeout=self.socket_timeout,
            socket_keepalive=True,
        )

    async def connect(self) -> bool:
        """Create the client if needed and ping it. Returns True when reachable."""
        if self.redis is None:
            self.redis = self._new_client()
        try:
            await self.redis.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s:%s (%s)", self.host, self.port, e)
            return False
        logger.info("Redis cache connected: %s:%s", self.host, self.port)
        return True

    async def close(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Replace an owned client after a connection error. Returns True if reconnected."""
        if not self._owns_client or self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Ignoring error while closing broken Redis client")
        self.redis = None
        return await self.connect()

    async def _run(
        self, operation: str, call: Callable[[redis.Redis], Awaitable[T]]
    ) -> T:
        if self.redis is None:
            raise CacheBackendError(operation, "redis client is not connected")
        try:
            return await call(self.redis)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            if await self._reconnect() and self.redis is not None:
                try:
                    return await call(self.redis)
                except redis.RedisError as retry_error:
                    raise CacheBackendError(operation, str(retry_error)) from retry_error
            raise CacheBackendError(operation, str(e)) from e
        except redis.RedisError as e:
            raise CacheBackendError(operation, str(e)) from e

    @staticmethod
    def _encode(key: str, value: Any) -> str:
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise CacheBackendError("set", f"value for {key} is not serializable: {e}") from e

    @staticmethod
    def _decode(key: str, raw: str) -> Any:
        try:
            return json.loads(raw)
        except ValueError as e:
            raise CacheBackendError("get", f"corrupt value for {key}: {e}") from e

    async def get(self, key: str) -> Any:
        raw = await self._run("get", lambda r: r.get(key))
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            raise CacheMissError(key)
        if raw == CACHE_PLACEHOLDER:
            raise CachePlaceholderError(key)
        logger.debug("Cache HIT: %s", key)
        return self._decode(key, raw)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        serialized = self._encode(key, value)
        await self._run("set", lambda r: r.set(key, serialized, ex=ttl))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    async def multi_get(self, keys: list[str]) -> dict[str, Any]:
        if not keys:
            return {}
        raws = await self._run("multi_get", lambda r: r.mget(keys))
        found: dict[str, Any] = {}
        for key, raw in zip(keys, raws, strict=True):
            if raw is None or raw == CACHE_PLACEHOLDER:
                continue
            found[key] = self._decode(key, raw)
        return found

    async def multi_set(self, values: dict[str, Any], ttl: int) -> None:
        if not values:
            return
        encoded = {key: self._encode(key, value) for key, value in values.items()}

        async def _pipeline(r: redis.Redis) -> list[Any]:
            async with r.pipeline(transaction=False) as pipe:
                for key, raw in encoded.items():
                    pipe.set(key, raw, ex=ttl)
                return await pipe.execute()

        await self._run("multi_set", _pipeline)
        logger.debug("Cache MSET: %s keys (TTL: %ss)", len(encoded), ttl)

    async def delete(self, key: str) -> None:
        await self._run("delete", lambda r: r.delete(key))
        logger.debug("Cache DELETE: %s", key)

    async def set_placeholder(self, key: str) -> None:
        await self._run(
            "set_placeholder",
            lambda r: r.set(key, CACHE_PLACEHOLDER, ex=self.placeholder_ttl),
        )
        logger.debug("Cache PLACEHOLDER: %s (TTL: %ss)", key, self.placeholder_ttl)
