# adminboard/rbac/roles.py
"""System role hierarchy and default permissions."""

from adminboard.models.enums import UserRole
from adminboard.rbac.permissions import WILDCARD

# Higher numbers indicate higher privilege levels
ROLE_HIERARCHY: dict[UserRole, int] = {
    UserRole.MEMBER: 1,
    UserRole.ADMIN: 2,
    UserRole.SUPERADMIN: 3,
}

DEFAULT_ROLE = UserRole.MEMBER

_MEMBER_PERMISSIONS = [
    "projects.view",
    "clients.view",
    "profiles.view",
    "profiles.edit",
]

ROLE_PERMISSIONS: dict[UserRole, list[str]] = {
    UserRole.MEMBER: _MEMBER_PERMISSIONS,
    UserRole.ADMIN: [
        *_MEMBER_PERMISSIONS,
        "projects.create",
        "projects.edit",
        "projects.delete",
        "clients.create",
        "clients.edit",
        "clients.delete",
        "users.view",
        "users.view_all",
        "companies.view",
        "settings.view",
    ],
    # Superadmin always gets everything
    UserRole.SUPERADMIN: [WILDCARD],
}
