# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission based authorization."""

from adminboard.rbac.engine import PermissionEngine, Principal
from adminboard.rbac.permissions import WILDCARD, matches_permission
from adminboard.rbac.registry import DEFAULT_REGISTRY, PermissionRegistry

__all__ = [
    "DEFAULT_REGISTRY",
    "PermissionEngine",
    "PermissionRegistry",
    "Principal",
    "WILDCARD",
    "matches_permission",
]
