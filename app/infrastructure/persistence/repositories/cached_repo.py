"""Cached repository: cache-aside reads plus write-path invalidation for one entity.

Reads by id go through the RecordLoader (entity cache, single-flight store
load, not-found placeholder). Writes go to the store only; update and delete
then delete the cache entry so the next read reloads fresh state. Filtered
lists always read the store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from app.application.dtos.query import QueryParams
from app.core.constants import CACHE_TTL_RECORDS
from app.infrastructure.cache.cache_protocol import CacheStore
from app.infrastructure.cache.entity_cache import EntityCache
from app.infrastructure.cache.record_loader import (
    CacheErrorHook,
    RecordLoader,
    validate_record_id,
)
from app.infrastructure.persistence.repositories.base import BaseRepository

RecordT = TypeVar("RecordT")


class CachedRepository(Generic[RecordT]):
    """Fixed repository interface used by the API for every entity."""

    def __init__(
        self,
        store: BaseRepository[Any, RecordT],
        cache_store: CacheStore | None = None,
        *,
        ttl: int = CACHE_TTL_RECORDS,
        on_cache_error: CacheErrorHook | None = None,
    ) -> None:
        """Initialize cached repository.

        Args:
            store: Backing store accessor for the entity.
            cache_store: Shared cache store, or None to read the store directly.
            ttl: Expiry in seconds for cached records.
            on_cache_error: Hook for best-effort cache write failures.
        """
        self.store = store
        cache = (
            EntityCache(
                cache_store,
                store.cache_prefix,
                store.record_type,
                id_field=store.id_field,
            )
            if cache_store is not None
            else None
        )
        self.loader: RecordLoader[RecordT] = RecordLoader(
            store.entity,
            store.query,
            cache,
            query_many=store.query_many,
            id_field=store.id_field,
            ttl=ttl,
            on_cache_error=on_cache_error,
        )

    @property
    def entity(self) -> str:
        return self.store.entity

    @property
    def id_field(self) -> str:
        return self.store.id_field

    async def create(self, values: Mapping[str, Any]) -> int:
        """Insert a record and return its id. The cache is not touched."""
        return await self.store.insert(values)

    async def get_by_id(self, record_id: int) -> RecordT:
        return await self.loader.load(record_id)

    async def get_by_ids(self, record_ids: list[int]) -> list[RecordT]:
        """Return the records that exist among record_ids, in request order."""
        found = await self.loader.load_many(record_ids)
        return [found[i] for i in dict.fromkeys(record_ids) if i in found]

    async def update_by_id(self, record_id: int, values: Mapping[str, Any]) -> None:
        """Sparse update, then invalidate the cache entry even if the store write failed."""
        validate_record_id(record_id, self.id_field)
        try:
            await self.store.update_partial(record_id, values)
        finally:
            await self.loader.invalidate(record_id)

    async def delete_by_id(self, record_id: int) -> None:
        """Delete from the store, then invalidate the cache entry."""
        await self.store.delete_by_id(record_id)
        await self.loader.invalidate(record_id)

    async def get_by_columns(self, params: QueryParams) -> tuple[list[RecordT], int]:
        return await self.store.query_by_filter(params)
