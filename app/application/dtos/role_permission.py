"""DTOs for role-permission assignments. Identified by role_id."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RolePermissionResult:
    role_id: int
    permission_id: int
