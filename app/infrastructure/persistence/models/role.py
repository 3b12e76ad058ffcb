"""Role ORM model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel


class Role(AuditedModel, Base):
    """Role. Table: roles."""

    __tablename__ = "roles"

    role_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role_code: Mapped[str] = mapped_column(String(255), nullable=False)
    role_desc: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    status: Mapped[str | None] = mapped_column(String(10), nullable=True, default="")
