# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission resolution and authorization checks."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from adminboard.models.enums import UserRole
from adminboard.rbac.permissions import WILDCARD, matches_permission
from adminboard.rbac.registry import PermissionRegistry

if TYPE_CHECKING:
    from adminboard.models.user import User

logger = logging.getLogger(__name__)


class HasPermissions(Protocol):
    """Anything that carries a custom role's permission list."""

    permissions: list[str]


CustomRoleLookup = Callable[[uuid.UUID], HasPermissions | None]


@dataclass(frozen=True)
class Principal:
    """The authenticated actor subject to authorization checks."""

    user_id: uuid.UUID | None
    role: UserRole
    custom_role_id: uuid.UUID | None = None
    organization_id: uuid.UUID | None = None

    @classmethod
    def from_user(cls, user: User) -> Principal:
        """Build a principal from a user row."""
        return cls(
            user_id=user.id,
            role=user.role,
            custom_role_id=user.custom_role_id,
            organization_id=user.company_id,
        )


def _no_custom_roles(role_id: uuid.UUID) -> HasPermissions | None:
    return None


class PermissionEngine:
    """Resolves effective permissions and answers authorization queries.

    Every query degrades to a boolean (or an empty set); nothing here raises
    for a missing principal, an empty permission list or a failing custom
    role lookup.
    """

    def __init__(
        self,
        registry: PermissionRegistry,
        custom_role_lookup: CustomRoleLookup | None = None,
    ) -> None:
        self.registry = registry
        self._lookup = custom_role_lookup or _no_custom_roles

    def resolve_permissions(self, principal: Principal | None) -> frozenset[str]:
        """Get the effective permission set of a principal.

        Superadmin short-circuits to the wildcard and is never narrowed by a
        custom role. An assigned custom role replaces the system role
        defaults; if it cannot be resolved the defaults are used instead.
        """
        if principal is None:
            return frozenset()

        if principal.role == UserRole.SUPERADMIN:
            return frozenset({WILDCARD})

        if principal.custom_role_id is not None:
            custom_role = self._lookup_custom_role(principal.custom_role_id)
            if custom_role is not None:
                return frozenset(custom_role.permissions)
            logger.info(
                f"Custom role {principal.custom_role_id} not resolvable, "
                f"falling back to {principal.role.value} defaults"
            )

        return self.registry.default_permissions(principal.role)

    def _lookup_custom_role(self, role_id: uuid.UUID) -> HasPermissions | None:
        try:
            return self._lookup(role_id)
        except Exception as e:
            logger.warning(f"Custom role lookup failed for {role_id}: {e}")
            return None

    def has_permission(self, principal: Principal | None, required: str) -> bool:
        """Check if a principal holds a permission matching ``required``."""
        if principal is None:
            return False
        held = self.resolve_permissions(principal)
        return self._matches_any(held, required)

    def has_any_permission(
        self, principal: Principal | None, required: Iterable[str]
    ) -> bool:
        """Check if a principal holds at least one of the permissions.

        An empty requirement list never authorizes.
        """
        required = list(required)
        if principal is None or not required:
            return False
        held = self.resolve_permissions(principal)
        return any(self._matches_any(held, perm) for perm in required)

    def has_all_permissions(
        self, principal: Principal | None, required: Iterable[str]
    ) -> bool:
        """Check if a principal holds every one of the permissions.

        An empty requirement list never authorizes, so "all of zero" is False.
        """
        required = list(required)
        if principal is None or not required:
            return False
        held = self.resolve_permissions(principal)
        return all(self._matches_any(held, perm) for perm in required)

    def has_min_role(self, principal: Principal | None, min_role: UserRole) -> bool:
        """Check the underlying system role against a minimum rank.

        Custom roles are ignored here.
        """
        if principal is None:
            return False
        return self.registry.rank(principal.role) >= self.registry.rank(min_role)

    def compare_roles(self, a: UserRole, b: UserRole) -> int:
        """Compare two roles by rank: -1 if a < b, 0 if equal, 1 if a > b."""
        rank_a = self.registry.rank(a)
        rank_b = self.registry.rank(b)
        if rank_a < rank_b:
            return -1
        if rank_a > rank_b:
            return 1
        return 0

    @staticmethod
    def _matches_any(held: Iterable[str], required: str) -> bool:
        return any(matches_permission(perm, required) for perm in held)
