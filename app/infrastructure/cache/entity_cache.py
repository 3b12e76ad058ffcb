"""Typed per-entity facade over a CacheStore.

Translates record ids to namespaced keys and records to cacheable dicts.
One EntityCache per entity; several may share one CacheStore.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from app.infrastructure.cache.cache_protocol import CacheStore
from app.infrastructure.cache.codec import record_from_dict, record_to_dict
from app.infrastructure.cache.keys import record_id_from_key, record_key, validate_prefix
from app.infrastructure.exceptions import CacheBackendError, CachePlaceholderError

RecordT = TypeVar("RecordT")


class EntityCache(Generic[RecordT]):
    """Cache for one entity's records, keyed by the record's identifier field.

    Id 0 is never written, so get(0) always misses.
    """

    def __init__(
        self,
        store: CacheStore,
        prefix: str,
        record_type: type[RecordT],
        *,
        id_field: str = "id",
    ) -> None:
        """Initialize entity cache.

        Args:
            store: Shared cache store.
            prefix: Key namespace ending with ':' (e.g. 'files:').
            record_type: Record dataclass used to rebuild cached values.
            id_field: Attribute of the record that holds its identifier.
        """
        self.store = store
        self.prefix = validate_prefix(prefix)
        self.record_type = record_type
        self.id_field = id_field

    def key(self, record_id: int) -> str:
        return record_key(self.prefix, record_id)

    def _decode(self, key: str, cached: Any) -> RecordT:
        if not isinstance(cached, dict):
            raise CacheBackendError("get", f"unexpected value type for {key}")
        try:
            return record_from_dict(self.record_type, cached)
        except (TypeError, ValueError) as e:
            raise CacheBackendError("get", f"corrupt record for {key}: {e}") from e

    async def get(self, record_id: int) -> RecordT:
        """Return cached record.

        Raises:
            CacheMissError: No entry for the id.
            CachePlaceholderError: Entry is the not-found placeholder.
            CacheBackendError: Store failure or undecodable entry.
        """
        key = self.key(record_id)
        return self._decode(key, await self.store.get(key))

    async def set(self, record_id: int, record: RecordT | None, ttl: int) -> None:
        """Write record; no-op when record is None or record_id is 0."""
        if record is None or record_id == 0:
            return
        await self.store.set(self.key(record_id), record_to_dict(record), ttl)

    async def multi_get(self, record_ids: list[int]) -> dict[int, RecordT]:
        """Return cached records keyed by id; ids without a record are left out."""
        keys = [self.key(record_id) for record_id in record_ids]
        cached = await self.store.multi_get(keys)
        return {
            record_id_from_key(self.prefix, key): self._decode(key, value)
            for key, value in cached.items()
        }

    async def multi_set(self, records: list[RecordT], ttl: int) -> None:
        """Write records keyed by their own identifier field; skips id 0."""
        values: dict[str, Any] = {}
        for record in records:
            record_id = getattr(record, self.id_field)
            if not record_id:
                continue
            values[self.key(record_id)] = record_to_dict(record)
        if values:
            await self.store.multi_set(values, ttl)

    async def delete(self, record_id: int) -> None:
        await self.store.delete(self.key(record_id))

    async def set_placeholder(self, record_id: int) -> None:
        await self.store.set_placeholder(self.key(record_id))

    @staticmethod
    def is_placeholder(error: BaseException) -> bool:
        """Return True if error signals a not-found placeholder hit."""
        return isinstance(error, CachePlaceholderError)
