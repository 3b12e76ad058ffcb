"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model. No password: it is never cached or returned."""

    id: int
    user_name: str
    user_gender: str = ""
    nick_name: str = ""
    user_phone: str = ""
    user_email: str = ""
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
