# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""
from adminboard.schemas.auth import AuthResponse, LoginCodeRequest, VerifyCodeRequest
from adminboard.schemas.client import (
    ClientCreate,
    ClientFilters,
    ClientResponse,
    ClientUpdate,
)
from adminboard.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
)
from adminboard.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from adminboard.schemas.project import (
    ProjectCreate,
    ProjectFilters,
    ProjectResponse,
    ProjectStatusUpdate,
    ProjectUpdate,
)
from adminboard.schemas.rbac import (
    CustomRoleCreate,
    CustomRoleResponse,
    CustomRoleUpdate,
    PermissionSchema,
)
from adminboard.schemas.user import (
    CustomRoleAssignment,
    UserCreate,
    UserResponse,
    UserRoleUpdate,
    UserUpdate,
)

__all__ = [
    # Auth
    "AuthResponse",
    "LoginCodeRequest",
    "VerifyCodeRequest",
    # Common
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "PaginatedResponse",
    "PaginationMeta",
    # User
    "CustomRoleAssignment",
    "UserCreate",
    "UserResponse",
    "UserRoleUpdate",
    "UserUpdate",
    # Company
    "CompanyCreate",
    "CompanyResponse",
    "CompanyUpdate",
    # RBAC
    "CustomRoleCreate",
    "CustomRoleResponse",
    "CustomRoleUpdate",
    "PermissionSchema",
    # Client
    "ClientCreate",
    "ClientFilters",
    "ClientResponse",
    "ClientUpdate",
    # Project
    "ProjectCreate",
    "ProjectFilters",
    "ProjectResponse",
    "ProjectStatusUpdate",
    "ProjectUpdate",
]
