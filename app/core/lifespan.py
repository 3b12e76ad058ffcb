"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown wiring: database engine and session
factory, cache store, repositories. Everything lives on app.state; nothing
is a module global.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import redis.asyncio as redis
from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.infrastructure.cache.factory import create_cache_store
from app.infrastructure.persistence.database import (
    create_engine,
    create_session_factory,
    create_tables,
)
from app.infrastructure.persistence.repositories.registry import build_repositories

logger = logging.getLogger(__name__)


async def init_app_state(
    app: FastAPI,
    settings: Settings,
    *,
    redis_client: redis.Redis | None = None,
) -> None:
    """Build engine, session factory, cache store and repositories on app.state.

    Startup order: engine (+ create tables when enabled), cache store,
    repositories. A Redis cache that cannot be reached leaves app.state.cache
    as None and the repositories read straight from the database.
    """
    engine = create_engine(settings)
    if settings.database_create_tables:
        await create_tables(engine)
    session_factory = create_session_factory(engine)
    cache = await create_cache_store(settings, redis_client=redis_client)

    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.cache = cache
    app.state.repositories = build_repositories(
        session_factory, cache, record_ttl=settings.cache_ttl_records
    )
    backend = type(cache).__name__ if cache is not None else "off"
    logger.info("Application state ready (cache: %s)", backend)


async def close_app_state(app: FastAPI) -> None:
    """Shutdown order: cache close, engine dispose."""
    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.close()
        app.state.cache = None
        logger.info("Cache closed")

    if getattr(app.state, "engine", None) is not None:
        await app.state.engine.dispose()
        app.state.engine = None
        logger.info("Database engine disposed")


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    await init_app_state(app, get_settings())
    try:
        yield
    finally:
        await close_app_state(app)
