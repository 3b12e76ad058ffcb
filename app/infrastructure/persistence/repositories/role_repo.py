"""Role repository. Read methods return RoleResult (DTO)."""

from app.application.dtos.role import RoleResult
from app.core.constants import CACHE_PREFIX_ROLES
from app.infrastructure.persistence.models.role import Role
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _role_to_result(r: Role) -> RoleResult:
    """Map ORM Role to application RoleResult."""
    return RoleResult(
        id=r.id,
        role_name=r.role_name,
        role_code=r.role_code,
        role_desc=r.role_desc or "",
        status=r.status or "",
        created_at=ensure_utc(r.created_at),
        updated_at=ensure_utc(r.updated_at),
    )


class RoleRepository(BaseRepository[Role, RoleResult]):
    """Role repository. Cached under roles:<id>."""

    entity = "roles"
    model = Role
    record_type = RoleResult
    cache_prefix = CACHE_PREFIX_ROLES

    def _to_record(self, obj: Role) -> RoleResult:
        return _role_to_result(obj)
