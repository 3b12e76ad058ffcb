"""Cache key builders. Single place for key format (DRY).

Entity keys are <prefix><id>, where the prefix ends with CACHE_KEY_SEP, e.g.
"files:42". Prefixes are validated so two entity caches sharing one store
never produce the same key.
"""

from app.core.constants import CACHE_KEY_SEP


def validate_prefix(prefix: str) -> str:
    """Return prefix unchanged if usable as an entity namespace.

    Raises:
        ValueError: If prefix is empty, does not end with CACHE_KEY_SEP, or
            contains the separator anywhere else.
    """
    if not prefix or not prefix.endswith(CACHE_KEY_SEP):
        raise ValueError(
            f"Cache key prefix {prefix!r} must end with separator {CACHE_KEY_SEP!r}"
        )
    if CACHE_KEY_SEP in prefix[:-1]:
        raise ValueError(
            f"Cache key prefix {prefix!r} must contain separator {CACHE_KEY_SEP!r} only at the end"
        )
    return prefix


def record_key(prefix: str, record_id: int) -> str:
    """Cache key for one record of an entity."""
    return f"{prefix}{record_id}"


def record_id_from_key(prefix: str, key: str) -> int:
    """Inverse of record_key for keys built with the same prefix."""
    if not key.startswith(prefix):
        raise ValueError(f"Cache key {key!r} does not start with prefix {prefix!r}")
    return int(key[len(prefix):])
