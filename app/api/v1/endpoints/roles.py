"""Roles API: create, get, update, delete, list and batch get."""

from app.api.v1.crud import build_crud_router
from app.api.v1.dependencies import get_role_repo
from app.schemas.role import (
    RoleCreate,
    RoleListResponse,
    RoleResponse,
    RoleUpdate,
)

router = build_crud_router(
    get_role_repo,
    create_model=RoleCreate,
    update_model=RoleUpdate,
    response_model=RoleResponse,
    list_model=RoleListResponse,
)
