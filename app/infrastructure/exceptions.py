"""Infrastructure exceptions for cache operations.

Cache errors extend AdminException so presentation can map them to HTTP
responses consistently. CacheMissError and CachePlaceholderError are
control-flow signals for the read path; CacheBackendError is a real failure.
"""

from app.domain.exceptions import AdminException


class CacheException(AdminException):
    """Base exception for cache operations."""


class CacheMissError(CacheException):
    """Key is absent from the cache."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Cache miss: {key}", "CACHE_MISS", {"key": key})


class CachePlaceholderError(CacheException):
    """Key holds the not-found placeholder (record confirmed absent)."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Cache placeholder: {key}", "CACHE_PLACEHOLDER", {"key": key}
        )


class CacheBackendError(CacheException):
    """Cache backend unreachable or failed (connection, timeout, bad payload)."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Cache {operation} failed",
            "CACHE_BACKEND_ERROR",
            {"operation": operation, "reason": reason},
        )
