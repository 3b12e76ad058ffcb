"""DTOs for menus (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MenuResult:
    """Menu read-model."""

    id: int
    name: str
    path: str
    icon: str = ""
    parent_id: int = 0
    order: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
