"""Menu repository (menus table)."""

from app.application.dtos.menu import MenuResult
from app.core.constants import CACHE_PREFIX_MENUS
from app.infrastructure.persistence.models.menu import Menu
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _menu_to_result(m: Menu) -> MenuResult:
    return MenuResult(
        id=m.id,
        name=m.name,
        path=m.path,
        icon=m.icon or "",
        parent_id=m.parent_id or 0,
        order=m.order or 0,
        created_at=ensure_utc(m.created_at),
        updated_at=ensure_utc(m.updated_at),
    )


class MenuRepository(BaseRepository[Menu, MenuResult]):
    """Navigation menu entries. Cached under menus:<id>."""

    entity = "menus"
    model = Menu
    record_type = MenuResult
    cache_prefix = CACHE_PREFIX_MENUS

    def _to_record(self, obj: Menu) -> MenuResult:
        return _menu_to_result(obj)
