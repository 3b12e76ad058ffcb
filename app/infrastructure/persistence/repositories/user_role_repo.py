"""UserRole repository: user–role link table, keyed by user_id."""

from app.application.dtos.user_role import UserRoleResult
from app.core.constants import CACHE_PREFIX_USER_ROLES
from app.infrastructure.persistence.models.permission import UserRole
from app.infrastructure.persistence.repositories.base import BaseRepository


class UserRoleRepository(BaseRepository[UserRole, UserRoleResult]):
    """User–role link table only. Rows are hard-deleted."""

    entity = "userRoles"
    model = UserRole
    record_type = UserRoleResult
    cache_prefix = CACHE_PREFIX_USER_ROLES
    id_field = "user_id"

    def _to_record(self, obj: UserRole) -> UserRoleResult:
        return UserRoleResult(user_id=obj.user_id, role_id=obj.role_id)
