"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IdMixin, TimestampMixin, SoftDeleteMixin and the combined
AuditedModel used by every entity with its own identifier.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

# BIGINT everywhere except SQLite, where only INTEGER PRIMARY KEY autoincrements.
RecordId = BigInteger().with_variant(Integer, "sqlite")


class IdMixin:
    """Mixin for models with an auto-increment unsigned 64-bit id."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(RecordId, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime | None]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=True
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime | None]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=True,
        )


class SoftDeleteMixin:
    """Mixin for soft delete (deleted_at). Null means not deleted."""

    @declared_attr
    def deleted_at(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True, index=True)


class AuditedModel(IdMixin, TimestampMixin, SoftDeleteMixin):
    """Combined mixin: id + created_at/updated_at + deleted_at."""

    __abstract__ = True
