# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from adminboard.api.deps import (
    get_db,
    get_permission_engine,
    require_min_role,
    require_permission,
)
from adminboard.exceptions import (
    NotFoundError,
    ReferenceNotFoundError,
    ValidationFailedError,
)
from adminboard.models import User, UserRole
from adminboard.rbac import PermissionEngine, Principal
from adminboard.schemas.common import PaginatedResponse, PaginationMeta
from adminboard.schemas.user import (
    CustomRoleAssignment,
    UserCreate,
    UserResponse,
    UserRoleUpdate,
    UserUpdate,
)
from adminboard.services import rbac_service, user_service

router = APIRouter()


def _can_view_all(engine: PermissionEngine, user: User) -> bool:
    return engine.has_permission(Principal.from_user(user), "users.view_all")


def _get_visible_user(
    db: Session,
    engine: PermissionEngine,
    current_user: User,
    user_id: uuid.UUID,
    include_deleted: bool = False,
) -> User:
    """Get a user the caller may see.

    Without users.view_all only users of the caller's own company are visible.
    """
    user = user_service.get_user(db, user_id, include_deleted=include_deleted)
    if not user or (
        not _can_view_all(engine, current_user)
        and user.company_id != current_user.company_id
    ):
        raise NotFoundError("User not found")
    return user


def _check_company_assignment(
    engine: PermissionEngine, current_user: User, company_id: uuid.UUID | None
) -> None:
    """Without users.view_all users can only be placed in the caller's company."""
    if company_id != current_user.company_id and not _can_view_all(
        engine, current_user
    ):
        details = {"company_id": str(company_id)} if company_id else {}
        raise ReferenceNotFoundError("Company not found", details)


def _check_role_ceiling(
    engine: PermissionEngine, current_user: User, role: UserRole
) -> None:
    if engine.compare_roles(role, current_user.role) > 0:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Cannot grant role {role.value} above your own",
        )


@router.get("", response_model=PaginatedResponse[UserResponse])
def list_users(
    search: str | None = Query(None),
    role: UserRole | None = Query(None),
    company_id: uuid.UUID | None = Query(None),
    include_deleted: bool = Query(False),
    offset: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    db: Session = Depends(get_db),
    engine: PermissionEngine = Depends(get_permission_engine),
    current_user: User = Depends(require_permission("users.view")),
) -> PaginatedResponse[UserResponse]:
    """List users.

    Requires users.view; listing users of other companies requires
    users.view_all.
    """
    if not _can_view_all(engine, current_user):
        company_id = current_user.company_id

    users, total = user_service.get_users(
        db,
        search=search,
        role=role,
        company_id=company_id,
        include_deleted=include_deleted,
        offset=offset,
        limit=limit,
    )
    return PaginatedResponse[UserResponse](
        data=[UserResponse.model_validate(u) for u in users],
        meta=PaginationMeta(total=total, offset=offset, limit=limit),
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    data: UserCreate,
    db: Session = Depends(get_db),
    engine: PermissionEngine = Depends(get_permission_engine),
    current_user: User = Depends(require_permission("users.create")),
) -> User:
    """Create a new user. Requires users.create permission.

    The new user's role may not rank above the caller's. Without
    users.view_all the user joins the caller's company.
    """
    _check_role_ceiling(engine, current_user, data.role)
    if "company_id" not in data.model_fields_set and not _can_view_all(
        engine, current_user
    ):
        data = data.model_copy(update={"company_id": current_user.company_id})
    _check_company_assignment(engine, current_user, data.company_id)
    return user_service.create_user(db, data)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    engine: PermissionEngine = Depends(get_permission_engine),
    current_user: User = Depends(require_permission("users.view")),
) -> User:
    """Get a user by ID."""
    return _get_visible_user(db, engine, current_user, user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: uuid.UUID,
    data: UserUpdate,
    db: Session = Depends(get_db),
    engine: PermissionEngine = Depends(get_permission_engine),
    current_user: User = Depends(require_permission("users.edit")),
) -> User:
    """Update a user. Requires users.edit permission."""
    _get_visible_user(db, engine, current_user, user_id)
    if "company_id" in data.model_fields_set:
        _check_company_assignment(engine, current_user, data.company_id)
    return user_service.update_user(db, user_id, data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    engine: PermissionEngine = Depends(get_permission_engine),
    current_user: User = Depends(require_permission("users.delete")),
) -> None:
    """Soft-delete a user. Requires users.delete permission."""
    if user_id == current_user.id:
        raise ValidationFailedError("You cannot delete your own account")
    _get_visible_user(db, engine, current_user, user_id)
    user_service.soft_delete_user(db, user_id)


@router.post("/{user_id}/restore", response_model=UserResponse)
def restore_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    engine: PermissionEngine = Depends(get_permission_engine),
    current_user: User = Depends(require_permission("users.delete")),
) -> User:
    """Restore a soft-deleted user. Requires users.delete permission."""
    _get_visible_user(db, engine, current_user, user_id, include_deleted=True)
    return user_service.restore_user(db, user_id)


@router.put("/{user_id}/role", response_model=UserResponse)
def set_user_role(
    user_id: uuid.UUID,
    data: UserRoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_min_role(UserRole.SUPERADMIN)),
) -> User:
    """Change a user's system role. Superadmin only."""
    if user_id == current_user.id:
        raise ValidationFailedError("You cannot change your own role")
    return rbac_service.set_user_role(db, user_id, data.role)


@router.put("/{user_id}/custom-role", response_model=UserResponse)
def assign_custom_role(
    user_id: uuid.UUID,
    data: CustomRoleAssignment,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_min_role(UserRole.SUPERADMIN)),
) -> User:
    """Assign or clear a user's custom role. Superadmin only."""
    return rbac_service.assign_custom_role(db, user_id, data.custom_role_id)
