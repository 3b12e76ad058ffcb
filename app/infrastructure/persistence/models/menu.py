"""Menu ORM model (admin navigation tree)."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel, RecordId


class Menu(AuditedModel, Base):
    """Menu. Table: menus. parent_id 0 means top level."""

    __tablename__ = "menus"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    path: Mapped[str] = mapped_column(String(255), nullable=False)
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True, default="")
    parent_id: Mapped[int | None] = mapped_column(RecordId, nullable=True, default=0)
    order: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
