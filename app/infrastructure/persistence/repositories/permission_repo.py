"""Permission repository. Read methods return PermissionResult (DTO)."""

from app.application.dtos.permission import PermissionResult
from app.core.constants import CACHE_PREFIX_PERMISSIONS
from app.infrastructure.persistence.models.permission import Permission
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _permission_to_result(p: Permission) -> PermissionResult:
    """Map ORM Permission to application PermissionResult."""
    return PermissionResult(
        id=p.id,
        name=p.name,
        code=p.code,
        description=p.description or "",
        created_at=ensure_utc(p.created_at),
        updated_at=ensure_utc(p.updated_at),
    )


class PermissionRepository(BaseRepository[Permission, PermissionResult]):
    """Permission repository. Cached under permissions:<id>."""

    entity = "permissions"
    model = Permission
    record_type = PermissionResult
    cache_prefix = CACHE_PREFIX_PERMISSIONS

    def _to_record(self, obj: Permission) -> PermissionResult:
        return _permission_to_result(obj)
