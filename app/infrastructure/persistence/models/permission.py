"""Permission, RolePermission, and UserRole ORM models (RBAC)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel, RecordId


class Permission(AuditedModel, Base):
    """Permission. Table: permissions."""

    __tablename__ = "permissions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default="")


class RolePermission(Base):
    """Role-permission assignment. Table: role_permissions. Keyed by role_id."""

    __tablename__ = "role_permissions"

    role_id: Mapped[int] = mapped_column(RecordId, primary_key=True, autoincrement=False)
    permission_id: Mapped[int] = mapped_column(RecordId, nullable=False)


class UserRole(Base):
    """User-role assignment. Table: user_roles. Keyed by user_id."""

    __tablename__ = "user_roles"

    user_id: Mapped[int] = mapped_column(RecordId, primary_key=True, autoincrement=False)
    role_id: Mapped[int] = mapped_column(RecordId, nullable=False)
