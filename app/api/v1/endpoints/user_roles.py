"""User-role assignments API. Records are addressed by user_id."""

from app.api.v1.crud import build_crud_router
from app.api.v1.dependencies import get_user_role_repo
from app.schemas.user_role import (
    UserRoleCreate,
    UserRoleListResponse,
    UserRoleResponse,
    UserRoleUpdate,
)

router = build_crud_router(
    get_user_role_repo,
    create_model=UserRoleCreate,
    update_model=UserRoleUpdate,
    response_model=UserRoleResponse,
    list_model=UserRoleListResponse,
)
