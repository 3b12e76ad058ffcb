"""Permission API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PermissionCreate(BaseModel):
    """Request body for creating a permission."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    code: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=500)


class PermissionUpdate(BaseModel):
    """Request body for updating a permission (partial)."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=255)
    code: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=500)


class PermissionResponse(BaseModel):
    """Permission list/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    code: str
    description: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PermissionListResponse(BaseModel):
    items: list[PermissionResponse]
    total: int
