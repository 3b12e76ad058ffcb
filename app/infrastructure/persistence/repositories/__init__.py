"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.cached_repo import CachedRepository
from app.infrastructure.persistence.repositories.file_repo import FileRepository
from app.infrastructure.persistence.repositories.menu_repo import MenuRepository
from app.infrastructure.persistence.repositories.permission_repo import (
    PermissionRepository,
)
from app.infrastructure.persistence.repositories.registry import (
    Repositories,
    build_repositories,
)
from app.infrastructure.persistence.repositories.role_permission_repo import (
    RolePermissionRepository,
)
from app.infrastructure.persistence.repositories.role_repo import RoleRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository
from app.infrastructure.persistence.repositories.user_role_repo import (
    UserRoleRepository,
)

__all__ = [
    "BaseRepository",
    "CachedRepository",
    "FileRepository",
    "MenuRepository",
    "PermissionRepository",
    "Repositories",
    "RolePermissionRepository",
    "RoleRepository",
    "UserRepository",
    "UserRoleRepository",
    "build_repositories",
]
