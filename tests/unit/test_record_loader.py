"""Tests for RecordLoader: cache-aside reads, single-flight store loads, placeholders."""

import asyncio
from typing import Any
from unittest.mock import MagicMock

import pytest

from app.application.dtos import FileResult
from app.domain.exceptions import RecordNotFoundException, ValidationException
from app.infrastructure.cache.entity_cache import EntityCache
from app.infrastructure.cache.memory_cache import MemoryCache
from app.infrastructure.cache.record_loader import RecordLoader
from app.infrastructure.exceptions import (
    CacheBackendError,
    CacheMissError,
    CachePlaceholderError,
)


class FakeStore:
    """Backing store double: a dict of records, with call counters and an optional gate."""

    def __init__(self, records: dict[int, FileResult] | None = None) -> None:
        self.records = dict(records or {})
        self.query_calls: list[int] = []
        self.query_many_calls: list[list[int]] = []
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None

    async def query(self, record_id: int) -> FileResult:
        self.query_calls.append(record_id)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        try:
            return self.records[record_id]
        except KeyError:
            raise RecordNotFoundException("files", record_id) from None

    async def query_many(self, record_ids: list[int]) -> list[FileResult]:
        self.query_many_calls.append(list(record_ids))
        return [self.records[i] for i in record_ids if i in self.records]


class BrokenCache(MemoryCache):
    """MemoryCache whose selected operations fail like an unreachable backend."""

    def __init__(self, *failing: str) -> None:
        super().__init__(placeholder_ttl=600)
        self.failing = set(failing)

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            raise CacheBackendError(operation, "connection refused")

    async def get(self, key: str) -> Any:
        self._maybe_fail("get")
        return await super().get(key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        self._maybe_fail("set")
        await super().set(key, value, ttl)

    async def set_placeholder(self, key: str) -> None:
        self._maybe_fail("set_placeholder")
        await super().set_placeholder(key)

    async def delete(self, key: str) -> None:
        self._maybe_fail("delete")
        await super().delete(key)


def _file(record_id: int) -> FileResult:
    return FileResult(id=record_id, filename=f"{record_id}.txt", url=f"/f/{record_id}")


def _loader(
    store: FakeStore,
    cache_store: MemoryCache | None,
    **kwargs: Any,
) -> RecordLoader[FileResult]:
    cache = None
    if cache_store is not None:
        cache = EntityCache(cache_store, "files:", FileResult)
    return RecordLoader("files", store.query, cache, ttl=300, **kwargs)


async def test_cold_miss_queries_store_once_then_serves_from_cache(
    memory_cache: MemoryCache,
) -> None:
    store = FakeStore({1: _file(1)})
    loader = _loader(store, memory_cache)

    assert await loader.load(1) == _file(1)
    assert await loader.load(1) == _file(1)
    assert store.query_calls == [1]
    assert await memory_cache.get("files:1") == {
        "id": 1,
        "filename": "1.txt",
        "url": "/f/1",
        "size": 0,
        "mime_type": "",
        "user_id": 0,
        "created_at": None,
        "updated_at": None,
    }


async def test_concurrent_readers_of_missing_id_share_one_query(
    memory_cache: MemoryCache,
) -> None:
    store = FakeStore()
    store.gate = asyncio.Event()
    loader = _loader(store, memory_cache)

    tasks = [asyncio.create_task(loader.load(5)) for _ in range(10)]
    await asyncio.sleep(0)
    store.gate.set()
    results = await asyncio.gather(*tasks, return_exceptions=True)

    assert all(isinstance(r, RecordNotFoundException) for r in results)
    assert store.query_calls == [5]
    with pytest.raises(CachePlaceholderError):
        await memory_cache.get("files:5")

    with pytest.raises(RecordNotFoundException):
        await loader.load(5)
    assert store.query_calls == [5]
    assert loader.in_flight == 0


async def test_concurrent_readers_of_existing_id_share_one_query(
    memory_cache: MemoryCache,
) -> None:
    store = FakeStore({3: _file(3)})
    store.gate = asyncio.Event()
    loader = _loader(store, memory_cache)

    tasks = [asyncio.create_task(loader.load(3)) for _ in range(10)]
    await asyncio.sleep(0)
    assert loader.in_flight == 1
    store.gate.set()
    results = await asyncio.gather(*tasks)

    assert results == [_file(3)] * 10
    assert store.query_calls == [3]


async def test_store_error_propagates_and_leaves_cache_untouched(
    memory_cache: MemoryCache,
) -> None:
    store = FakeStore({1: _file(1)})
    store.error = RuntimeError("database is locked")
    loader = _loader(store, memory_cache)

    with pytest.raises(RuntimeError, match="database is locked"):
        await loader.load(1)
    with pytest.raises(CacheMissError):
        await memory_cache.get("files:1")

    store.error = None
    assert await loader.load(1) == _file(1)
    assert store.query_calls == [1, 1]


async def test_cache_read_failure_propagates_without_store_query() -> None:
    store = FakeStore({1: _file(1)})
    loader = _loader(store, BrokenCache("get"))

    with pytest.raises(CacheBackendError):
        await loader.load(1)
    assert store.query_calls == []


async def test_cache_write_failure_is_reported_not_raised() -> None:
    store = FakeStore({1: _file(1)})
    hook = MagicMock()
    loader = _loader(store, BrokenCache("set", "set_placeholder"), on_cache_error=hook)

    assert await loader.load(1) == _file(1)
    with pytest.raises(RecordNotFoundException):
        await loader.load(2)

    assert [c.args[:3] for c in hook.call_args_list] == [
        ("files", "set", 1),
        ("files", "set_placeholder", 2),
    ]
    assert all(isinstance(c.args[3], CacheBackendError) for c in hook.call_args_list)


async def test_without_cache_every_read_hits_store() -> None:
    store = FakeStore({1: _file(1)})
    loader = _loader(store, None)

    await loader.load(1)
    await loader.load(1)
    with pytest.raises(RecordNotFoundException):
        await loader.load(2)
    assert store.query_calls == [1, 1, 2]


@pytest.mark.parametrize("record_id", [0, -1, 2**64])
async def test_invalid_id_is_rejected_before_cache_and_store(
    memory_cache: MemoryCache, record_id: int
) -> None:
    store = FakeStore()
    loader = _loader(store, memory_cache)
    with pytest.raises(ValidationException):
        await loader.load(record_id)
    assert store.query_calls == []


async def test_load_many_mixes_cached_stored_and_missing(memory_cache: MemoryCache) -> None:
    store = FakeStore({1: _file(1), 2: _file(2)})
    loader = _loader(store, memory_cache, query_many=store.query_many)
    await loader.load(1)

    found = await loader.load_many([1, 2, 3, 2])

    assert found == {1: _file(1), 2: _file(2)}
    assert store.query_many_calls == [[2, 3]]
    assert await memory_cache.get("files:2") is not None
    with pytest.raises(CachePlaceholderError):
        await memory_cache.get("files:3")

    assert await loader.load_many([2, 3]) == {2: _file(2)}
    assert store.query_many_calls == [[2, 3], [3]]


async def test_load_many_without_batch_query_loads_each(memory_cache: MemoryCache) -> None:
    store = FakeStore({1: _file(1)})
    loader = _loader(store, memory_cache)

    assert await loader.load_many([1, 4]) == {1: _file(1)}
    assert sorted(store.query_calls) == [1, 4]


async def test_invalidate_swallows_cache_errors() -> None:
    hook = MagicMock()
    loader = _loader(FakeStore(), BrokenCache("delete"), on_cache_error=hook)

    await loader.invalidate(1)

    hook.assert_called_once()
    assert hook.call_args.args[:3] == ("files", "delete", 1)
