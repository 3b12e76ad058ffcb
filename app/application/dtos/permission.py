"""DTOs for permission use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PermissionResult:
    """Permission read-model."""

    id: int
    name: str
    code: str
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
