"""Files API: uploaded file metadata. Reads by id are served cache-aside (files:<id>)."""

from app.api.v1.crud import build_crud_router
from app.api.v1.dependencies import get_file_repo
from app.schemas.file import (
    FileCreate,
    FileListResponse,
    FileResponse,
    FileUpdate,
)

router = build_crud_router(
    get_file_repo,
    create_model=FileCreate,
    update_model=FileUpdate,
    response_model=FileResponse,
    list_model=FileListResponse,
)
