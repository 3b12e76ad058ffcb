"""RolePermission repository: role–permission link table, keyed by role_id."""

from app.application.dtos.role_permission import RolePermissionResult
from app.core.constants import CACHE_PREFIX_ROLE_PERMISSIONS
from app.infrastructure.persistence.models.permission import RolePermission
from app.infrastructure.persistence.repositories.base import BaseRepository


class RolePermissionRepository(BaseRepository[RolePermission, RolePermissionResult]):
    """Role–permission link table only. Rows are hard-deleted."""

    entity = "rolePermissions"
    model = RolePermission
    record_type = RolePermissionResult
    cache_prefix = CACHE_PREFIX_ROLE_PERMISSIONS
    id_field = "role_id"

    def _to_record(self, obj: RolePermission) -> RolePermissionResult:
        return RolePermissionResult(role_id=obj.role_id, permission_id=obj.permission_id)
