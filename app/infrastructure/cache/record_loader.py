"""Cache-aside record loader with single-flight de-duplication and negative caching.

Read path for one id:

1. Look the id up in the entity cache. A record is returned; a placeholder
   becomes RecordNotFoundException; a miss continues to step 2; any other
   cache error propagates (no fallback to the store).
2. Join or start the single-flight load for the id. Exactly one store query
   runs for all concurrent callers. A found record is written to the cache
   with the record TTL; a not-found result writes a placeholder; any other
   store error propagates and leaves the cache untouched. Cache writes here
   are best-effort: failures go to the on_cache_error hook and never fail
   the read.

Without a cache the loader queries the store on every read.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from app.core.constants import CACHE_TTL_RECORDS, MAX_RECORD_ID
from app.domain.exceptions import RecordNotFoundException, ValidationException
from app.infrastructure.cache.entity_cache import EntityCache
from app.infrastructure.cache.singleflight import SingleFlightGroup
from app.infrastructure.exceptions import CacheException, CacheMissError

RecordT = TypeVar("RecordT")

logger = logging.getLogger(__name__)

# (entity, operation, record_id, error)
CacheErrorHook = Callable[[str, str, int, CacheException], None]


def log_cache_error(
    entity: str, operation: str, record_id: int, error: CacheException
) -> None:
    """Default hook: best-effort cache writes are logged, never raised."""
    logger.warning(
        "cache.%s error for %s id=%s: %s",
        operation,
        entity,
        record_id,
        error.message,
        extra={"details": error.details},
    )


def validate_record_id(record_id: int, field: str = "id") -> int:
    """Return record_id if it is a valid unsigned 64-bit identifier other than 0."""
    if record_id < 1 or record_id > MAX_RECORD_ID:
        raise ValidationException(f"{field} must be between 1 and {MAX_RECORD_ID}", field)
    return record_id


class RecordLoader(Generic[RecordT]):
    """Resolves reads by id through the entity cache, falling back to the store once per id."""

    def __init__(
        self,
        entity: str,
        query: Callable[[int], Awaitable[RecordT]],
        cache: EntityCache[RecordT] | None = None,
        *,
        query_many: Callable[[list[int]], Awaitable[list[RecordT]]] | None = None,
        id_field: str = "id",
        ttl: int = CACHE_TTL_RECORDS,
        on_cache_error: CacheErrorHook | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            entity: Entity name used in errors and logs.
            query: Store lookup by id; raises RecordNotFoundException when absent.
            cache: Entity cache, or None for cache-bypass mode.
            query_many: Optional batched store lookup used by load_many.
            id_field: Attribute of the record that holds its identifier.
            ttl: Expiry in seconds for records written to the cache.
            on_cache_error: Hook for best-effort cache write failures.
        """
        self.entity = entity
        self.cache = cache
        self.id_field = id_field
        self.ttl = ttl
        self._query = query
        self._query_many = query_many
        self._on_cache_error = on_cache_error or log_cache_error
        self._group = SingleFlightGroup() if cache is not None else None

    @property
    def in_flight(self) -> int:
        """Number of ids with a store query currently running."""
        return len(self._group) if self._group is not None else 0

    def _report(self, operation: str, record_id: int, error: CacheException) -> None:
        self._on_cache_error(self.entity, operation, record_id, error)

    async def load(self, record_id: int) -> RecordT:
        """Return the record for record_id.

        Raises:
            ValidationException: record_id is 0 or out of range.
            RecordNotFoundException: Store has no such record (or a placeholder says so).
            CacheException: Cache lookup failed for a reason other than a miss.
        """
        validate_record_id(record_id)
        cache, group = self.cache, self._group
        if cache is None or group is None:
            return await self._query(record_id)

        try:
            return await cache.get(record_id)
        except CacheMissError:
            pass
        except CacheException as e:
            if cache.is_placeholder(e):
                raise RecordNotFoundException(self.entity, record_id) from None
            raise

        return await group.do(
            str(record_id), lambda: self._load_from_store(cache, record_id)
        )

    async def _load_from_store(
        self, cache: EntityCache[RecordT], record_id: int
    ) -> RecordT:
        try:
            record = await self._query(record_id)
        except RecordNotFoundException:
            try:
                await cache.set_placeholder(record_id)
            except CacheException as e:
                self._report("set_placeholder", record_id, e)
            raise
        try:
            await cache.set(record_id, record, self.ttl)
        except CacheException as e:
            self._report("set", record_id, e)
        return record

    async def load_many(self, record_ids: list[int]) -> dict[int, RecordT]:
        """Return found records keyed by id; ids with no record are left out.

        Cached records come from one multi_get. The remaining ids are loaded
        with one batched store query when query_many is configured (found
        records are cached, absent ids get placeholders), otherwise one
        de-duplicated load() per id.
        """
        ids = list(dict.fromkeys(validate_record_id(i) for i in record_ids))
        if not ids:
            return {}
        if self.cache is None:
            if self._query_many is not None:
                return {self._record_id(r): r for r in await self._query_many(ids)}
            return await self._load_each(ids)

        found = await self.cache.multi_get(ids)
        missing = [i for i in ids if i not in found]
        if not missing:
            return found

        if self._query_many is None:
            found.update(await self._load_each(missing))
            return found

        loaded = {self._record_id(r): r for r in await self._query_many(missing)}
        if loaded:
            try:
                await self.cache.multi_set(list(loaded.values()), self.ttl)
            except CacheException as e:
                self._report("multi_set", next(iter(loaded)), e)
        for record_id in missing:
            if record_id in loaded:
                continue
            try:
                await self.cache.set_placeholder(record_id)
            except CacheException as e:
                self._report("set_placeholder", record_id, e)
        found.update(loaded)
        return found

    async def _load_each(self, record_ids: list[int]) -> dict[int, RecordT]:
        records: dict[int, RecordT] = {}
        for record_id in record_ids:
            try:
                records[record_id] = await self.load(record_id)
            except RecordNotFoundException:
                continue
        return records

    def _record_id(self, record: RecordT) -> int:
        return getattr(record, self.id_field)

    async def invalidate(self, record_id: int) -> None:
        """Delete the cache entry for record_id; failures go to the hook."""
        if self.cache is None:
            return
        try:
            await self.cache.delete(record_id)
        except CacheException as e:
            self._report("delete", record_id, e)
