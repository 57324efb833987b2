# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Custom role API endpoints."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from adminboard.api.deps import get_db, require_min_role, require_permission
from adminboard.exceptions import NotFoundError
from adminboard.models import CustomRole, User, UserRole
from adminboard.schemas.rbac import (
    CustomRoleCreate,
    CustomRoleResponse,
    CustomRoleUpdate,
    PermissionSchema,
)
from adminboard.services import rbac_service

router = APIRouter()

require_superadmin = require_min_role(UserRole.SUPERADMIN)


@router.get("/permissions", response_model=list[PermissionSchema])
def list_permissions(
    current_user: User = Depends(require_permission("roles.view")),
) -> list[PermissionSchema]:
    """List every registered permission."""
    return [
        PermissionSchema(**perm) for perm in rbac_service.get_registered_permissions()
    ]


@router.get("", response_model=list[CustomRoleResponse])
def list_roles(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_superadmin),
) -> list[CustomRole]:
    """List all custom roles."""
    return rbac_service.list_custom_roles(db)


@router.post("", response_model=CustomRoleResponse, status_code=status.HTTP_201_CREATED)
def create_role(
    data: CustomRoleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_superadmin),
) -> CustomRole:
    """Create a custom role."""
    return rbac_service.create_custom_role(db, data, created_by=current_user)


@router.get("/{role_id}", response_model=CustomRoleResponse)
def get_role(
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_superadmin),
) -> CustomRole:
    """Get a custom role by ID."""
    role = rbac_service.get_custom_role(db, role_id)
    if not role:
        raise NotFoundError("Role not found")
    return role


@router.put("/{role_id}", response_model=CustomRoleResponse)
def update_role(
    role_id: uuid.UUID,
    data: CustomRoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_superadmin),
) -> CustomRole:
    """Update a custom role's description or permissions."""
    return rbac_service.update_custom_role(db, role_id, data)


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_superadmin),
) -> None:
    """Delete a custom role."""
    rbac_service.delete_custom_role(db, role_id)
