"""Repository registry: one CachedRepository per entity, sharing one cache store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos import (
    FileResult,
    MenuResult,
    PermissionResult,
    RolePermissionResult,
    RoleResult,
    UserResult,
    UserRoleResult,
)
from app.core.constants import CACHE_TTL_RECORDS
from app.infrastructure.cache.cache_protocol import CacheStore
from app.infrastructure.cache.record_loader import CacheErrorHook
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.cached_repo import CachedRepository
from app.infrastructure.persistence.repositories.file_repo import FileRepository
from app.infrastructure.persistence.repositories.menu_repo import MenuRepository
from app.infrastructure.persistence.repositories.permission_repo import (
    PermissionRepository,
)
from app.infrastructure.persistence.repositories.role_permission_repo import (
    RolePermissionRepository,
)
from app.infrastructure.persistence.repositories.role_repo import RoleRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository
from app.infrastructure.persistence.repositories.user_role_repo import (
    UserRoleRepository,
)

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class Repositories:
    """Process-wide repositories, built once in the lifespan and kept on app.state."""

    files: CachedRepository[FileResult]
    menus: CachedRepository[MenuResult]
    permissions: CachedRepository[PermissionResult]
    roles: CachedRepository[RoleResult]
    role_permissions: CachedRepository[RolePermissionResult]
    user_roles: CachedRepository[UserRoleResult]
    users: CachedRepository[UserResult]


def build_repositories(
    session_factory: async_sessionmaker[AsyncSession],
    cache_store: CacheStore | None,
    *,
    record_ttl: int = CACHE_TTL_RECORDS,
    on_cache_error: CacheErrorHook | None = None,
) -> Repositories:
    """Wire every entity's store accessor to the shared cache store."""

    def cached(store: BaseRepository[Any, RecordT]) -> CachedRepository[RecordT]:
        return CachedRepository(
            store, cache_store, ttl=record_ttl, on_cache_error=on_cache_error
        )

    return Repositories(
        files=cached(FileRepository(session_factory)),
        menus=cached(MenuRepository(session_factory)),
        permissions=cached(PermissionRepository(session_factory)),
        roles=cached(RoleRepository(session_factory)),
        role_permissions=cached(RolePermissionRepository(session_factory)),
        user_roles=cached(UserRoleRepository(session_factory)),
        users=cached(UserRepository(session_factory)),
    )
