"""Role-permission assignment API schemas. Records are keyed by role_id."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_RECORD_ID


class RolePermissionCreate(BaseModel):
    """Request body for assigning a permission to a role."""

    model_config = ConfigDict(extra="forbid")

    role_id: int = Field(..., ge=1, le=MAX_RECORD_ID)
    permission_id: int = Field(..., ge=1, le=MAX_RECORD_ID)


class RolePermissionUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    permission_id: int | None = Field(default=None, ge=0, le=MAX_RECORD_ID)


class RolePermissionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    role_id: int
    permission_id: int


class RolePermissionListResponse(BaseModel):
    items: list[RolePermissionResponse]
    total: int
