"""File repository (files table). Reads return FileResult DTOs."""

from app.application.dtos.file import FileResult
from app.core.constants import CACHE_PREFIX_FILES
from app.infrastructure.persistence.models.file import File
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _file_to_result(f: File) -> FileResult:
    """Map ORM File to application FileResult."""
    return FileResult(
        id=f.id,
        filename=f.filename,
        url=f.url,
        size=f.size or 0,
        mime_type=f.mime_type or "",
        user_id=f.user_id or 0,
        created_at=ensure_utc(f.created_at),
        updated_at=ensure_utc(f.updated_at),
    )


class FileRepository(BaseRepository[File, FileResult]):
    """Uploaded file metadata. Cached under files:<id>."""

    entity = "files"
    model = File
    record_type = FileResult
    cache_prefix = CACHE_PREFIX_FILES

    def _to_record(self, obj: File) -> FileResult:
        return _file_to_result(obj)
