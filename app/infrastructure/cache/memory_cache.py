"""In-process cache store with per-key expiry.

Values are stored JSON-encoded, like the Redis backend, so callers never share
mutable objects with the cache and both backends accept the same values.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from typing import Any

from app.core.constants import CACHE_PLACEHOLDER, CACHE_TTL_PLACEHOLDER
from app.infrastructure.exceptions import (
    CacheBackendError,
    CacheMissError,
    CachePlaceholderError,
)

logger = logging.getLogger(__name__)


class MemoryCache:
    """Dict-backed cache store. Expired keys are dropped lazily on access.

    When max_entries is reached, expired keys are purged first and then the
    oldest inserted keys are evicted.
    """

    def __init__(
        self,
        *,
        placeholder_ttl: int = CACHE_TTL_PLACEHOLDER,
        max_entries: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize memory cache.

        Args:
            placeholder_ttl: Expiry in seconds for not-found placeholders.
            max_entries: Upper bound on stored keys.
            clock: Monotonic time source (injectable for tests).
        """
        self.placeholder_ttl = placeholder_ttl
        self.max_entries = max_entries
        self._clock = clock
        self._items: dict[str, tuple[str, float]] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return True

    def _lookup(self, key: str) -> str | None:
        item = self._items.get(key)
        if item is None:
            return None
        raw, expires_at = item
        if expires_at <= self._clock():
            del self._items[key]
            return None
        return raw

    def _store(self, key: str, raw: str, ttl: int) -> None:
        self._items.pop(key, None)
        if len(self._items) >= self.max_entries:
            self._evict()
        self._items[key] = (raw, self._clock() + ttl)

    def _evict(self) -> None:
        now = self._clock()
        for key in [k for k, (_, exp) in self._items.items() if exp <= now]:
            del self._items[key]
        while len(self._items) >= self.max_entries:
            oldest = next(iter(self._items))
            del self._items[oldest]
            logger.debug("Cache EVICT: %s", oldest)

    @staticmethod
    def _encode(key: str, value: Any) -> str:
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise CacheBackendError("set", f"value for {key} is not serializable: {e}") from e

    async def get(self, key: str) -> Any:
        raw = self._lookup(key)
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            raise CacheMissError(key)
        if raw == CACHE_PLACEHOLDER:
            raise CachePlaceholderError(key)
        logger.debug("Cache HIT: %s", key)
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        self._store(key, self._encode(key, value), ttl)
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    async def multi_get(self, keys: list[str]) -> dict[str, Any]:
        found: dict[str, Any] = {}
        for key in keys:
            raw = self._lookup(key)
            if raw is None or raw == CACHE_PLACEHOLDER:
                continue
            found[key] = json.loads(raw)
        return found

    async def multi_set(self, values: dict[str, Any], ttl: int) -> None:
        encoded = {key: self._encode(key, value) for key, value in values.items()}
        for key, raw in encoded.items():
            self._store(key, raw, ttl)

    async def delete(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            logger.debug("Cache DELETE: %s", key)

    async def set_placeholder(self, key: str) -> None:
        self._store(key, CACHE_PLACEHOLDER, self.placeholder_ttl)
        logger.debug("Cache PLACEHOLDER: %s (TTL: %ss)", key, self.placeholder_ttl)

    async def close(self) -> None:
        self._items.clear()
