"""User API schemas. The password is write-only: accepted on create/update, never returned."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Request body for creating a user."""

    model_config = ConfigDict(extra="forbid")

    user_name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8, max_length=128)
    user_gender: str = Field(default="", max_length=10)
    nick_name: str = Field(default="", max_length=255)
    user_phone: str = Field(default="", max_length=20)
    user_email: str = Field(default="", max_length=255)
    status: str = Field(default="", max_length=10)


class UserUpdate(BaseModel):
    """Request body for updating a user (partial). A new password is re-hashed."""

    model_config = ConfigDict(extra="forbid")

    user_name: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, min_length=8, max_length=128)
    user_gender: str | None = Field(default=None, max_length=10)
    nick_name: str | None = Field(default=None, max_length=255)
    user_phone: str | None = Field(default=None, max_length=20)
    user_email: str | None = Field(default=None, max_length=255)
    status: str | None = Field(default=None, max_length=10)


class UserResponse(BaseModel):
    """User detail response (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_name: str
    user_gender: str
    nick_name: str
    user_phone: str
    user_email: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserListResponse(BaseModel):
    items: list[UserResponse]
    total: int
