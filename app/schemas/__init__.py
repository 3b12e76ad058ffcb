"""Pydantic request/response schemas for the API."""

from app.schemas.common import BatchRequest, CreatedResponse, ListRequest
from app.schemas.file import FileCreate, FileListResponse, FileResponse, FileUpdate
from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.menu import MenuCreate, MenuListResponse, MenuResponse, MenuUpdate
from app.schemas.permission import (
    PermissionCreate,
    PermissionListResponse,
    PermissionResponse,
    PermissionUpdate,
)
from app.schemas.role import RoleCreate, RoleListResponse, RoleResponse, RoleUpdate
from app.schemas.role_permission import (
    RolePermissionCreate,
    RolePermissionListResponse,
    RolePermissionResponse,
    RolePermissionUpdate,
)
from app.schemas.user import UserCreate, UserListResponse, UserResponse, UserUpdate
from app.schemas.user_role import (
    UserRoleCreate,
    UserRoleListResponse,
    UserRoleResponse,
    UserRoleUpdate,
)

__all__ = [
    "BatchRequest",
    "CreatedResponse",
    "FileCreate",
    "FileListResponse",
    "FileResponse",
    "FileUpdate",
    "HealthResponse",
    "ListRequest",
    "MenuCreate",
    "MenuListResponse",
    "MenuResponse",
    "MenuUpdate",
    "PermissionCreate",
    "PermissionListResponse",
    "PermissionResponse",
    "PermissionUpdate",
    "ReadinessResponse",
    "RoleCreate",
    "RoleListResponse",
    "RoleResponse",
    "RoleUpdate",
    "RolePermissionCreate",
    "RolePermissionListResponse",
    "RolePermissionResponse",
    "RolePermissionUpdate",
    "UserCreate",
    "UserListResponse",
    "UserResponse",
    "UserUpdate",
    "UserRoleCreate",
    "UserRoleListResponse",
    "UserRoleResponse",
    "UserRoleUpdate",
]
