"""Permissions API."""

from app.api.v1.crud import build_crud_router
from app.api.v1.dependencies import get_permission_repo
from app.schemas.permission import (
    PermissionCreate,
    PermissionListResponse,
    PermissionResponse,
    PermissionUpdate,
)

router = build_crud_router(
    get_permission_repo,
    create_model=PermissionCreate,
    update_model=PermissionUpdate,
    response_model=PermissionResponse,
    list_model=PermissionListResponse,
)
