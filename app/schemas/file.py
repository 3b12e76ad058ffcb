"""File API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FileCreate(BaseModel):
    """Request body for creating a file record."""

    model_config = ConfigDict(extra="forbid")

    filename: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=255)
    size: int = Field(default=0, ge=0)
    mime_type: str = Field(default="", max_length=100)
    user_id: int = Field(default=0, ge=0)


class FileUpdate(BaseModel):
    """Request body for updating a file (sparse: empty and zero values are ignored)."""

    model_config = ConfigDict(extra="forbid")

    filename: str | None = Field(default=None, max_length=255)
    url: str | None = Field(default=None, max_length=255)
    size: int | None = Field(default=None, ge=0)
    mime_type: str | None = Field(default=None, max_length=100)
    user_id: int | None = Field(default=None, ge=0)


class FileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    filename: str
    url: str
    size: int
    mime_type: str
    user_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FileListResponse(BaseModel):
    items: list[FileResponse]
    total: int
