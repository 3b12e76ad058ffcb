"""DTOs for user-role assignments. Identified by user_id."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRoleResult:
    user_id: int
    role_id: int
