"""File ORM model (uploaded file metadata)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel, RecordId


class File(AuditedModel, Base):
    """File. Table: files."""

    __tablename__ = "files"

    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(255), nullable=False)
    size: Mapped[int | None] = mapped_column(RecordId, nullable=True, default=0)
    mime_type: Mapped[str | None] = mapped_column(String(100), nullable=True, default="")
    user_id: Mapped[int | None] = mapped_column(RecordId, nullable=True, default=0)
