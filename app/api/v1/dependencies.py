"""Presentation-layer dependency injection.

Repositories are process-wide: built once by the lifespan and kept on
app.state. Routes depend on the per-entity getters here, never on
infrastructure construction.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.application.dtos import (
    FileResult,
    MenuResult,
    PermissionResult,
    RolePermissionResult,
    RoleResult,
    UserResult,
    UserRoleResult,
)
from app.infrastructure.persistence.repositories import CachedRepository, Repositories


def get_repositories(request: Request) -> Repositories:
    """Repositories built by init_app_state."""
    return request.app.state.repositories


RepositoriesDep = Annotated[Repositories, Depends(get_repositories)]


def get_file_repo(repos: RepositoriesDep) -> CachedRepository[FileResult]:
    return repos.files


def get_menu_repo(repos: RepositoriesDep) -> CachedRepository[MenuResult]:
    return repos.menus


def get_permission_repo(repos: RepositoriesDep) -> CachedRepository[PermissionResult]:
    return repos.permissions


def get_role_repo(repos: RepositoriesDep) -> CachedRepository[RoleResult]:
    return repos.roles


def get_role_permission_repo(
    repos: RepositoriesDep,
) -> CachedRepository[RolePermissionResult]:
    return repos.role_permissions


def get_user_role_repo(repos: RepositoriesDep) -> CachedRepository[UserRoleResult]:
    return repos.user_roles


def get_user_repo(repos: RepositoriesDep) -> CachedRepository[UserResult]:
    return repos.users
