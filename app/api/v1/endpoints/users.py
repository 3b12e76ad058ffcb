"""Users API. Passwords are hashed on write and never returned."""

from app.api.v1.crud import build_crud_router
from app.api.v1.dependencies import get_user_repo
from app.schemas.user import (
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)

router = build_crud_router(
    get_user_repo,
    create_model=UserCreate,
    update_model=UserUpdate,
    response_model=UserResponse,
    list_model=UserListResponse,
)
