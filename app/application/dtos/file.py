"""DTOs for files (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FileResult:
    """File read-model (result of get_by_id, get_by_columns, etc.)."""

    id: int
    filename: str
    url: str
    size: int = 0
    mime_type: str = ""
    user_id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
