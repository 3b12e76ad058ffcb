"""Role API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RoleCreate(BaseModel):
    """Request body for creating a role."""

    model_config = ConfigDict(extra="forbid")

    role_name: str = Field(..., min_length=1, max_length=255)
    role_code: str = Field(..., min_length=1, max_length=255)
    role_desc: str = Field(default="", max_length=500)
    status: str = Field(default="", max_length=10)


class RoleUpdate(BaseModel):
    """Request body for updating a role (partial)."""

    model_config = ConfigDict(extra="forbid")

    role_name: str | None = Field(default=None, max_length=255)
    role_code: str | None = Field(default=None, max_length=255)
    role_desc: str | None = Field(default=None, max_length=500)
    status: str | None = Field(default=None, max_length=10)


class RoleResponse(BaseModel):
    """Role list/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    role_name: str
    role_code: str
    role_desc: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RoleListResponse(BaseModel):
    items: list[RoleResponse]
    total: int
