"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.file import File
from app.infrastructure.persistence.models.menu import Menu
from app.infrastructure.persistence.models.mixins import (
    AuditedModel,
    IdMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.permission import (
    Permission,
    RolePermission,
    UserRole,
)
from app.infrastructure.persistence.models.role import Role
from app.infrastructure.persistence.models.user import User

__all__ = [
    "File",
    "Menu",
    "Permission",
    "Role",
    "RolePermission",
    "User",
    "UserRole",
    "AuditedModel",
    "IdMixin",
    "SoftDeleteMixin",
    "TimestampMixin",
]
