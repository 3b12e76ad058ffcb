"""CachedRepository tests: cache-aside reads and write-path invalidation."""

from unittest.mock import AsyncMock

import pytest

from app.application.dtos import FileResult, QueryParams
from app.domain.exceptions import RecordNotFoundException, ValidationException
from app.infrastructure.cache.memory_cache import MemoryCache
from app.infrastructure.exceptions import CacheMissError, CachePlaceholderError
from app.infrastructure.persistence.repositories import (
    CachedRepository,
    FileRepository,
    build_repositories,
)


class CountingFileRepository(FileRepository):
    """FileRepository that records every id lookup that reaches the database."""

    def __init__(self, session_factory) -> None:
        super().__init__(session_factory)
        self.queried: list[int] = []

    async def query(self, record_id: int) -> FileResult:
        self.queried.append(record_id)
        return await super().query(record_id)


@pytest.fixture
def store(session_factory) -> CountingFileRepository:
    return CountingFileRepository(session_factory)


@pytest.fixture
def repo(store, memory_cache: MemoryCache) -> CachedRepository[FileResult]:
    return CachedRepository(store, memory_cache, ttl=300)


async def test_create_then_get_reads_store_once(
    repo: CachedRepository[FileResult], store: CountingFileRepository, memory_cache: MemoryCache
) -> None:
    record_id = await repo.create({"filename": "a.txt", "url": "/files/a.txt"})
    with pytest.raises(CacheMissError):
        await memory_cache.get(f"files:{record_id}")

    first = await repo.get_by_id(record_id)
    second = await repo.get_by_id(record_id)

    assert first.filename == "a.txt"
    assert second == first
    assert store.queried == [record_id]


async def test_partial_update_keeps_other_fields_and_invalidates(
    repo: CachedRepository[FileResult], memory_cache: MemoryCache
) -> None:
    record_id = await repo.create(
        {"filename": "a.txt", "url": "/a", "mime_type": "text/plain", "user_id": 3}
    )
    before = await repo.get_by_id(record_id)

    await repo.update_by_id(record_id, {"size": 100})

    with pytest.raises(CacheMissError):
        await memory_cache.get(f"files:{record_id}")
    after = await repo.get_by_id(record_id)
    assert after.size == 100
    assert (after.filename, after.url, after.mime_type, after.user_id) == (
        before.filename,
        before.url,
        before.mime_type,
        before.user_id,
    )


async def test_update_invalidates_even_when_store_write_fails(
    repo: CachedRepository[FileResult], store: CountingFileRepository, memory_cache: MemoryCache
) -> None:
    record_id = await repo.create({"filename": "a.txt", "url": "/a"})
    await repo.get_by_id(record_id)
    store.update_partial = AsyncMock(side_effect=RuntimeError("disk full"))

    with pytest.raises(RuntimeError):
        await repo.update_by_id(record_id, {"size": 1})
    with pytest.raises(CacheMissError):
        await memory_cache.get(f"files:{record_id}")


async def test_update_with_id_zero_is_rejected(repo: CachedRepository[FileResult]) -> None:
    with pytest.raises(ValidationException):
        await repo.update_by_id(0, {"size": 1})


async def test_delete_invalidates_and_later_reads_not_found(
    repo: CachedRepository[FileResult], memory_cache: MemoryCache
) -> None:
    record_id = await repo.create({"filename": "a.txt", "url": "/a"})
    await repo.get_by_id(record_id)

    await repo.delete_by_id(record_id)

    with pytest.raises(RecordNotFoundException):
        await repo.get_by_id(record_id)
    with pytest.raises(CachePlaceholderError):
        await memory_cache.get(f"files:{record_id}")


async def test_failed_delete_keeps_cache_entry(
    repo: CachedRepository[FileResult], store: CountingFileRepository, memory_cache: MemoryCache
) -> None:
    record_id = await repo.create({"filename": "a.txt", "url": "/a"})
    await repo.get_by_id(record_id)
    store.delete_by_id = AsyncMock(side_effect=RuntimeError("locked"))

    with pytest.raises(RuntimeError):
        await repo.delete_by_id(record_id)
    assert (await memory_cache.get(f"files:{record_id}"))["id"] == record_id


async def test_placeholder_is_replaced_after_create_and_invalidate(
    repo: CachedRepository[FileResult],
) -> None:
    with pytest.raises(RecordNotFoundException):
        await repo.get_by_id(1)
    record_id = await repo.create({"filename": "a.txt", "url": "/a"})
    assert record_id == 1
    # create does not touch the cache, so the placeholder still answers
    with pytest.raises(RecordNotFoundException):
        await repo.get_by_id(1)
    await repo.update_by_id(1, {"size": 5})
    assert (await repo.get_by_id(1)).size == 5


async def test_get_by_ids_keeps_request_order(repo: CachedRepository[FileResult]) -> None:
    ids = [await repo.create({"filename": f"{i}.txt", "url": f"/{i}"}) for i in range(3)]
    await repo.get_by_id(ids[1])
    records = await repo.get_by_ids([ids[2], 999, ids[0], ids[1], ids[2]])
    assert [r.id for r in records] == [ids[2], ids[0], ids[1]]


async def test_get_by_columns_reads_store(repo: CachedRepository[FileResult]) -> None:
    await repo.create({"filename": "a.txt", "url": "/a"})
    records, total = await repo.get_by_columns(QueryParams())
    assert total == 1
    assert records[0].filename == "a.txt"


async def test_without_cache_reads_store_every_time(store: CountingFileRepository) -> None:
    repo = CachedRepository(store, None)
    record_id = await repo.create({"filename": "a.txt", "url": "/a"})
    await repo.get_by_id(record_id)
    await repo.get_by_id(record_id)
    assert store.queried == [record_id, record_id]


async def test_registry_shares_one_cache_store(session_factory, memory_cache: MemoryCache) -> None:
    repos = build_repositories(session_factory, memory_cache, record_ttl=60)
    role_id = await repos.roles.create({"role_name": "Admin", "role_code": "admin"})
    await repos.role_permissions.create({"role_id": role_id, "permission_id": 2})

    await repos.roles.get_by_id(role_id)
    await repos.role_permissions.get_by_id(role_id)

    assert (await memory_cache.get(f"roles:{role_id}"))["role_code"] == "admin"
    assert (await memory_cache.get(f"rolePermissions:{role_id}"))["permission_id"] == 2
