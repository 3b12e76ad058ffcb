"""Menus API: navigation entries (create, get, update, delete, list, batch)."""

from app.api.v1.crud import build_crud_router
from app.api.v1.dependencies import get_menu_repo
from app.schemas.menu import (
    MenuCreate,
    MenuListResponse,
    MenuResponse,
    MenuUpdate,
)

router = build_crud_router(
    get_menu_repo,
    create_model=MenuCreate,
    update_model=MenuUpdate,
    response_model=MenuResponse,
    list_model=MenuListResponse,
)
