"""Tests for MemoryCache: expiry, placeholder, multi-get/set, eviction."""

import pytest

from app.infrastructure.cache.memory_cache import MemoryCache
from app.infrastructure.exceptions import (
    CacheBackendError,
    CacheMissError,
    CachePlaceholderError,
)


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCache:
    return MemoryCache(placeholder_ttl=600, max_entries=3, clock=clock)


async def test_get_missing_key_raises_miss(cache: MemoryCache) -> None:
    with pytest.raises(CacheMissError):
        await cache.get("files:1")


async def test_set_then_get_returns_copy(cache: MemoryCache) -> None:
    value = {"id": 1, "filename": "a.txt"}
    await cache.set("files:1", value, 300)
    got = await cache.get("files:1")
    assert got == value
    got["filename"] = "changed"
    assert (await cache.get("files:1"))["filename"] == "a.txt"


async def test_entry_expires_after_ttl(cache: MemoryCache, clock: FakeClock) -> None:
    await cache.set("files:1", {"id": 1}, 300)
    clock.now += 299
    assert await cache.get("files:1") == {"id": 1}
    clock.now += 1
    with pytest.raises(CacheMissError):
        await cache.get("files:1")
    assert len(cache) == 0


async def test_placeholder_uses_its_own_ttl(cache: MemoryCache, clock: FakeClock) -> None:
    await cache.set_placeholder("files:5")
    clock.now += 599
    with pytest.raises(CachePlaceholderError):
        await cache.get("files:5")
    clock.now += 1
    with pytest.raises(CacheMissError):
        await cache.get("files:5")


async def test_set_overwrites_placeholder(cache: MemoryCache) -> None:
    await cache.set_placeholder("files:5")
    await cache.set("files:5", {"id": 5}, 300)
    assert await cache.get("files:5") == {"id": 5}


async def test_multi_get_skips_missing_and_placeholders(cache: MemoryCache) -> None:
    await cache.multi_set({"files:1": {"id": 1}, "files:2": {"id": 2}}, 300)
    await cache.set_placeholder("files:3")
    found = await cache.multi_get(["files:1", "files:2", "files:3", "files:4"])
    assert found == {"files:1": {"id": 1}, "files:2": {"id": 2}}


async def test_delete_is_idempotent(cache: MemoryCache) -> None:
    await cache.set("files:1", {"id": 1}, 300)
    await cache.delete("files:1")
    await cache.delete("files:1")
    with pytest.raises(CacheMissError):
        await cache.get("files:1")


async def test_evicts_oldest_when_full(cache: MemoryCache) -> None:
    for i in range(1, 5):
        await cache.set(f"files:{i}", {"id": i}, 300)
    assert len(cache) == 3
    with pytest.raises(CacheMissError):
        await cache.get("files:1")
    assert await cache.get("files:4") == {"id": 4}


async def test_evicts_expired_before_live_entries(
    cache: MemoryCache, clock: FakeClock
) -> None:
    await cache.set("files:1", {"id": 1}, 300)
    await cache.set("files:2", {"id": 2}, 10)
    await cache.set("files:3", {"id": 3}, 300)
    clock.now += 20
    await cache.set("files:4", {"id": 4}, 300)
    assert await cache.get("files:1") == {"id": 1}
    assert await cache.get("files:4") == {"id": 4}


async def test_unserializable_value_raises_backend_error(cache: MemoryCache) -> None:
    with pytest.raises(CacheBackendError):
        await cache.set("files:1", {"bad": object()}, 300)


async def test_close_clears_entries(cache: MemoryCache) -> None:
    await cache.set("files:1", {"id": 1}, 300)
    await cache.close()
    assert len(cache) == 0


def test_empty_store_is_truthy(cache: MemoryCache) -> None:
    assert len(cache) == 0
    assert cache
