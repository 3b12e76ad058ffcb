"""Menu API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MenuCreate(BaseModel):
    """Request body for creating a menu entry. parent_id 0 is top level."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    path: str = Field(..., min_length=1, max_length=255)
    icon: str = Field(default="", max_length=255)
    parent_id: int = Field(default=0, ge=0)
    order: int = 0


class MenuUpdate(BaseModel):
    """Request body for updating a menu entry (partial)."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=255)
    path: str | None = Field(default=None, max_length=255)
    icon: str | None = Field(default=None, max_length=255)
    parent_id: int | None = Field(default=None, ge=0)
    order: int | None = None


class MenuResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    path: str
    icon: str
    parent_id: int
    order: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MenuListResponse(BaseModel):
    items: list[MenuResponse]
    total: int
