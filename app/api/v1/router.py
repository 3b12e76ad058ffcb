"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    files,
    health,
    menus,
    permissions,
    role_permissions,
    roles,
    user_roles,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(files.router, prefix="/files", tags=["files"])
api_router.include_router(menus.router, prefix="/menus", tags=["menus"])
api_router.include_router(
    permissions.router, prefix="/permissions", tags=["permissions"]
)
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
api_router.include_router(
    role_permissions.router, prefix="/role-permissions", tags=["role-permissions"]
)
api_router.include_router(
    user_roles.router, prefix="/user-roles", tags=["user-roles"]
)
api_router.include_router(users.router, prefix="/users", tags=["users"])
