"""User-role assignment API schemas. Records are keyed by user_id."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_RECORD_ID


class UserRoleCreate(BaseModel):
    """Request body for assigning a role to a user."""

    model_config = ConfigDict(extra="forbid")

    user_id: int = Field(..., ge=1, le=MAX_RECORD_ID)
    role_id: int = Field(..., ge=1, le=MAX_RECORD_ID)


class UserRoleUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    role_id: int | None = Field(default=None, ge=0, le=MAX_RECORD_ID)


class UserRoleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    role_id: int


class UserRoleListResponse(BaseModel):
    items: list[UserRoleResponse]
    total: int
