"""Role-permission assignments API. Records are addressed by role_id."""

from app.api.v1.crud import build_crud_router
from app.api.v1.dependencies import get_role_permission_repo
from app.schemas.role_permission import (
    RolePermissionCreate,
    RolePermissionListResponse,
    RolePermissionResponse,
    RolePermissionUpdate,
)

router = build_crud_router(
    get_role_permission_repo,
    create_model=RolePermissionCreate,
    update_model=RolePermissionUpdate,
    response_model=RolePermissionResponse,
    list_model=RolePermissionListResponse,
)
