# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Immutable permission registry.

The registry bundles the registered permissions, the role hierarchy and the
role defaults into one read-only object. It is built once at import time and
handed to the permission engine and services, so tests can build their own
without touching module state.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from adminboard.models.enums import UserRole
from adminboard.rbac.permissions import ALL_PERMISSIONS, CORE_PERMISSIONS, WILDCARD
from adminboard.rbac.roles import ROLE_HIERARCHY, ROLE_PERMISSIONS


@dataclass(frozen=True)
class PermissionRegistry:
    """Registered permissions plus the system role tables."""

    permissions: frozenset[str]
    hierarchy: Mapping[UserRole, int]
    role_permissions: Mapping[UserRole, frozenset[str]]
    descriptions: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        permissions: Iterable[str],
        hierarchy: Mapping[UserRole, int],
        role_permissions: Mapping[UserRole, Iterable[str]],
        descriptions: Mapping[str, str] | None = None,
    ) -> "PermissionRegistry":
        """Build a registry, checking that every role is fully described."""
        perms = frozenset(permissions)
        if WILDCARD in perms:
            raise ValueError("The wildcard is implicit and cannot be registered")

        missing = set(UserRole) - set(hierarchy)
        if missing:
            raise ValueError(f"Roles without hierarchy rank: {sorted(missing)}")

        defaults: dict[UserRole, frozenset[str]] = {}
        for role in UserRole:
            granted = frozenset(role_permissions.get(role, ()))
            if not granted:
                raise ValueError(f"Role {role.value} has no default permissions")
            unknown = granted - perms - {WILDCARD}
            if unknown:
                raise ValueError(
                    f"Role {role.value} references unknown permissions: "
                    f"{sorted(unknown)}"
                )
            defaults[role] = granted

        return cls(
            permissions=perms,
            hierarchy=MappingProxyType(dict(hierarchy)),
            role_permissions=MappingProxyType(defaults),
            descriptions=MappingProxyType(dict(descriptions or {})),
        )

    def is_valid_permission(self, permission: str) -> bool:
        """Check if a permission string is the wildcard or registered."""
        return permission == WILDCARD or permission in self.permissions

    def validate_permission_set(self, permissions: list[str]) -> list[str]:
        """Return the problems with a custom role's permission list.

        A valid list is non-empty and either the wildcard alone or a subset
        of the registered permissions.
        """
        if not permissions:
            return ["At least one permission is required"]
        if WILDCARD in permissions:
            if len(permissions) != 1:
                return ["The wildcard permission must be the only permission"]
            return []
        return [
            f"Unknown permission '{perm}'"
            for perm in permissions
            if perm not in self.permissions
        ]

    def default_permissions(self, role: UserRole) -> frozenset[str]:
        """Get the default permission set of a system role."""
        return self.role_permissions[role]

    def rank(self, role: UserRole) -> int:
        """Get the hierarchy rank of a system role."""
        return self.hierarchy[role]


def build_default_registry() -> PermissionRegistry:
    """Build the registry from the core permission and role tables."""
    return PermissionRegistry.build(
        permissions=ALL_PERMISSIONS,
        hierarchy=ROLE_HIERARCHY,
        role_permissions=ROLE_PERMISSIONS,
        descriptions={p["code"]: p["description"] for p in CORE_PERMISSIONS},
    )


DEFAULT_REGISTRY = build_default_registry()
