"""Cache store protocol (DIP). Implemented by MemoryCache and RedisCache.

Values are JSON-serializable objects. A key is either absent, holds a value,
or holds the not-found placeholder; get() signals the first and last cases
with CacheMissError and CachePlaceholderError.
"""

from typing import Any, Protocol


class CacheStore(Protocol):
    """Expiring key-value store with a reserved not-found placeholder."""

    async def get(self, key: str) -> Any:
        """Return the stored value.

        Raises:
            CacheMissError: Key is absent or expired.
            CachePlaceholderError: Key holds the not-found placeholder.
            CacheBackendError: Backend failure.
        """
        ...

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Store value with TTL in seconds; overwrites any placeholder."""
        ...

    async def multi_get(self, keys: list[str]) -> dict[str, Any]:
        """Return values for the keys that hold one; others are left out."""
        ...

    async def multi_set(self, values: dict[str, Any], ttl: int) -> None:
        """Store several values with the same TTL."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key. Absent key is not an error."""
        ...

    async def set_placeholder(self, key: str) -> None:
        """Store the not-found placeholder with the placeholder TTL."""
        ...

    async def close(self) -> None:
        """Release backend resources."""
        ...
