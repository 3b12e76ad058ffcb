"""Pytest configuration and fixtures for the admin backend.

Each test gets its own in-memory SQLite database (aiosqlite, StaticPool) so
store and API tests never share rows. The client fixture builds app state
with init_app_state directly because ASGITransport does not run the lifespan.
"""

from collections.abc import AsyncIterator
from typing import Any

import pytest
import redis.asyncio as redis
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.core.config import Settings
from app.core.lifespan import close_app_state, init_app_state
from app.infrastructure.cache.memory_cache import MemoryCache
from app.infrastructure.persistence.database import (
    create_engine,
    create_session_factory,
    create_tables,
)
from app.main import create_app


class FakeRedis:
    """In-memory stand-in for redis.asyncio.Redis (decode_responses=True).

    Supports the commands RedisCache uses. Set fail_with to an exception
    instance to make every command raise it.
    """

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.fail_with: Exception | None = None
        self.closed = False

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def ping(self) -> bool:
        self._check()
        return True

    async def get(self, key: str) -> str | None:
        self._check()
        return self.data.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self._check()
        self.data[key] = value
        self.ttls[key] = ex
        return True

    async def mget(self, keys: list[str]) -> list[str | None]:
        self._check()
        return [self.data.get(k) for k in keys]

    async def delete(self, *keys: str) -> int:
        self._check()
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed

    async def aclose(self) -> None:
        self.closed = True

    def pipeline(self, transaction: bool = True) -> "FakePipeline":
        return FakePipeline(self)


class FakePipeline:
    def __init__(self, client: FakeRedis) -> None:
        self.client = client
        self.commands: list[tuple[str, int | None, str]] = []

    async def __aenter__(self) -> "FakePipeline":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self.commands.clear()

    def set(self, key: str, value: str, ex: int | None = None) -> "FakePipeline":
        self.commands.append((key, ex, value))
        return self

    async def execute(self) -> list[bool]:
        self.client._check()
        for key, ex, value in self.commands:
            self.client.data[key] = value
            self.client.ttls[key] = ex
        return [True] * len(self.commands)


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def redis_connection_error() -> redis.ConnectionError:
    return redis.ConnectionError("connection refused")


@pytest.fixture
def settings() -> Settings:
    """Settings for tests: private in-memory database, memory cache."""
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        cache_type="memory",
    )


@pytest.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
def memory_cache() -> MemoryCache:
    return MemoryCache(placeholder_ttl=600)


@pytest.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    """FastAPI app with state built from the test settings."""
    application = create_app()
    await init_app_state(application, settings)
    yield application
    await close_app_state(application)


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
