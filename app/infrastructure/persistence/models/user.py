"""User ORM model (admin accounts)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel


class User(AuditedModel, Base):
    """User. Table: users. password holds a hash, never returned by reads."""

    __tablename__ = "users"

    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    user_gender: Mapped[str | None] = mapped_column(String(10), nullable=True, default="")
    nick_name: Mapped[str | None] = mapped_column(String(255), nullable=True, default="")
    user_phone: Mapped[str | None] = mapped_column(String(20), nullable=True, default="")
    user_email: Mapped[str | None] = mapped_column(String(255), nullable=True, default="")
    status: Mapped[str | None] = mapped_column(String(10), nullable=True, default="")
