"""User repository. Interface methods return UserResult DTOs (never the password)."""

import asyncio
from typing import Any

from app.application.dtos.user import UserResult
from app.core.constants import CACHE_PREFIX_USERS
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.security.password import get_password_hash
from app.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        user_name=u.user_name,
        user_gender=u.user_gender or "",
        nick_name=u.nick_name or "",
        user_phone=u.user_phone or "",
        user_email=u.user_email or "",
        status=u.status or "",
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
    )


class UserRepository(BaseRepository[User, UserResult]):
    """User repository. Passwords are stored as bcrypt hashes and cannot be filtered on."""

    entity = "users"
    model = User
    record_type = UserResult
    cache_prefix = CACHE_PREFIX_USERS
    hidden_fields = frozenset({"password"})

    def _to_record(self, obj: User) -> UserResult:
        return _user_to_result(obj)

    async def _before_write(self, values: dict[str, Any]) -> dict[str, Any]:
        password = values.get("password")
        if password:
            # bcrypt runs in a worker thread
            values = {**values, "password": await asyncio.to_thread(get_password_hash, password)}
        return values
