# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import uuid
from collections.abc import Callable, Generator

from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session

from adminboard.database import SessionLocal
from adminboard.models import User, UserRole
from adminboard.rbac import PermissionEngine, Principal
from adminboard.services import auth_service, rbac_service


def get_db() -> Generator[Session]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
) -> User:
    """Get current authenticated user from session cookie."""
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_obj = auth_service.get_session(db, session)
    if not session_obj:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_principal(current_user: User = Depends(get_current_user)) -> Principal:
    """Get the authorization principal of the current user."""
    return Principal.from_user(current_user)


def get_permission_engine(db: Session = Depends(get_db)) -> PermissionEngine:
    """Get a permission engine bound to the request's database session."""
    return rbac_service.get_permission_engine(db)


def get_organization_id(current_user: User = Depends(get_current_user)) -> uuid.UUID:
    """Get the organization the current user works in."""
    if current_user.company_id is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is not assigned to an organization",
        )
    return current_user.company_id


def require_permission(permission_code: str) -> Callable[..., User]:
    """Dependency for permission-based authorization."""

    def dependency(
        current_user: User = Depends(get_current_user),
        engine: PermissionEngine = Depends(get_permission_engine),
    ) -> User:
        principal = Principal.from_user(current_user)
        if not engine.has_permission(principal, permission_code):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {permission_code}",
            )
        return current_user

    return dependency


def require_min_role(min_role: UserRole) -> Callable[..., User]:
    """Dependency requiring a minimum system role. Custom roles do not count."""

    def dependency(
        current_user: User = Depends(get_current_user),
        engine: PermissionEngine = Depends(get_permission_engine),
    ) -> User:
        if not engine.has_min_role(Principal.from_user(current_user), min_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role {min_role.value} or higher required",
            )
        return current_user

    return dependency
