# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management service."""

import logging
import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from adminboard.events import AppEvent, event_bus
from adminboard.exceptions import (
    NotFoundError,
    ReferenceNotFoundError,
    ValidationFailedError,
)
from adminboard.lifecycle import check_version, commit_changes, commit_entity
from adminboard.models import User, UserRole
from adminboard.models.session import Session as SessionModel
from adminboard.schemas.user import UserCreate, UserUpdate
from adminboard.services import company_service
from adminboard.services.tenancy import escape_like

logger = logging.getLogger(__name__)


def get_users(
    db: Session,
    search: str | None = None,
    role: UserRole | None = None,
    company_id: uuid.UUID | None = None,
    include_deleted: bool = False,
    offset: int = 0,
    limit: int = 50,
) -> tuple[list[User], int]:
    """Get a page of users ordered by email, plus the total count."""
    query = db.query(User)
    if not include_deleted:
        query = query.filter(User.deleted_at.is_(None))
    if role:
        query = query.filter(User.role == role)
    if company_id:
        query = query.filter(User.company_id == company_id)
    if search:
        pattern = f"%{escape_like(search)}%"
        query = query.filter(
            or_(
                User.email.ilike(pattern, escape="\\"),
                User.full_name.ilike(pattern, escape="\\"),
            )
        )

    total = query.count()
    users = query.order_by(User.email.asc()).offset(offset).limit(limit).all()
    return users, total


def get_user(
    db: Session, user_id: uuid.UUID, include_deleted: bool = False
) -> User | None:
    """Get a user by ID."""
    query = db.query(User).filter(User.id == user_id)
    if not include_deleted:
        query = query.filter(User.deleted_at.is_(None))
    return query.first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email, case-insensitively."""
    return db.query(User).filter(User.email == email.lower()).first()


def _require_company(db: Session, company_id: uuid.UUID) -> None:
    if not company_service.get_company(db, company_id):
        raise ReferenceNotFoundError(
            "Company not found", {"company_id": str(company_id)}
        )


def create_user(db: Session, data: UserCreate) -> User:
    """Create a new user. Emails are stored lower-cased."""
    email = data.email.lower()
    if get_user_by_email(db, email):
        raise ValidationFailedError("User with this email already exists")
    if data.company_id is not None:
        _require_company(db, data.company_id)

    user = User(
        email=email,
        full_name=data.full_name,
        role=data.role,
        company_id=data.company_id,
        title=data.title,
        phone=data.phone,
        bio=data.bio,
    )
    db.add(user)
    commit_changes(db, "create User")
    db.refresh(user)

    event_bus.publish(
        AppEvent.USER_CREATED,
        {"user_id": str(user.id), "email": user.email, "role": user.role.value},
    )

    return user


def update_user(db: Session, user_id: uuid.UUID, data: UserUpdate) -> User:
    """Update a user's profile fields."""
    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    update_data = data.model_dump(exclude_unset=True, exclude={"version"})

    if update_data.get("email"):
        email = update_data["email"].lower()
        existing = get_user_by_email(db, email)
        if existing and existing.id != user.id:
            raise ValidationFailedError("User with this email already exists")
        update_data["email"] = email
    else:
        update_data.pop("email", None)

    company_id = update_data.get("company_id")
    if company_id is not None and company_id != user.company_id:
        _require_company(db, company_id)

    check_version(user, data.version, "User")

    for field, value in update_data.items():
        setattr(user, field, value)
    commit_entity(db, user, "User")

    event_bus.publish(AppEvent.USER_UPDATED, {"user_id": str(user.id)})

    return user


def soft_delete_user(db: Session, user_id: uuid.UUID) -> User:
    """Soft-delete a user and end all of their sessions."""
    user = get_user(db, user_id, include_deleted=True)
    if not user:
        raise NotFoundError("User not found")
    if user.deleted_at is not None:
        raise ValidationFailedError("User already deleted")

    db.query(SessionModel).filter(SessionModel.user_id == user.id).delete()
    user.deleted_at = datetime.utcnow()
    commit_entity(db, user, "User")

    logger.info(f"Soft-deleted user {user.id}")
    event_bus.publish(AppEvent.USER_DELETED, {"user_id": str(user.id)})

    return user


def restore_user(db: Session, user_id: uuid.UUID) -> User:
    """Restore a soft-deleted user."""
    user = get_user(db, user_id, include_deleted=True)
    if not user:
        raise NotFoundError("User not found")
    if user.deleted_at is None:
        raise ValidationFailedError("User is not deleted")

    user.deleted_at = None
    commit_entity(db, user, "User")

    event_bus.publish(AppEvent.USER_RESTORED, {"user_id": str(user.id)})

    return user
