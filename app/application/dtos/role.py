"""DTOs for role use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RoleResult:
    """Role read-model."""

    id: int
    role_name: str
    role_code: str
    role_desc: str = ""
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
