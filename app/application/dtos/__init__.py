"""Application DTOs (no ORM dependency). These are the cached record types."""

from app.application.dtos.file import FileResult
from app.application.dtos.menu import MenuResult
from app.application.dtos.permission import PermissionResult
from app.application.dtos.query import QueryColumn, QueryParams
from app.application.dtos.role import RoleResult
from app.application.dtos.role_permission import RolePermissionResult
from app.application.dtos.user import UserResult
from app.application.dtos.user_role import UserRoleResult

__all__ = [
    "FileResult",
    "MenuResult",
    "PermissionResult",
    "QueryColumn",
    "QueryParams",
    "RolePermissionResult",
    "RoleResult",
    "UserResult",
    "UserRoleResult",
]
