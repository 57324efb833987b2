# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role assignment and custom role service."""

import logging
import uuid

from sqlalchemy.orm import Session

from adminboard.events import AppEvent, event_bus
from adminboard.exceptions import (
    NotFoundError,
    ReferenceNotFoundError,
    ValidationFailedError,
)
from adminboard.lifecycle import commit_changes, commit_entity
from adminboard.models import CustomRole, User, UserRole
from adminboard.rbac import (
    DEFAULT_REGISTRY,
    PermissionEngine,
    PermissionRegistry,
    Principal,
)
from adminboard.schemas.rbac import CustomRoleCreate, CustomRoleUpdate
from adminboard.services import user_service

logger = logging.getLogger(__name__)


def get_custom_role(db: Session, role_id: uuid.UUID) -> CustomRole | None:
    """Get a custom role by ID."""
    return db.query(CustomRole).filter(CustomRole.id == role_id).first()


def get_custom_role_by_name(db: Session, name: str) -> CustomRole | None:
    """Get a custom role by name."""
    return db.query(CustomRole).filter(CustomRole.name == name).first()


def list_custom_roles(db: Session) -> list[CustomRole]:
    """Get all custom roles ordered by name."""
    return db.query(CustomRole).order_by(CustomRole.name.asc()).all()


def _validated_permissions(
    permissions: list[str], registry: PermissionRegistry
) -> list[str]:
    # Order-preserving de-duplication
    permissions = list(dict.fromkeys(permissions))
    problems = registry.validate_permission_set(permissions)
    if problems:
        raise ValidationFailedError("Invalid permissions", {"problems": problems})
    return permissions


def create_custom_role(
    db: Session,
    data: CustomRoleCreate,
    created_by: User | None = None,
    registry: PermissionRegistry = DEFAULT_REGISTRY,
) -> CustomRole:
    """Create a custom role from a validated permission set."""
    if get_custom_role_by_name(db, data.name):
        raise ValidationFailedError(f"Role '{data.name}' already exists")

    role = CustomRole(
        name=data.name,
        description=data.description,
        permissions=_validated_permissions(data.permissions, registry),
        created_by_id=created_by.id if created_by else None,
    )
    db.add(role)
    commit_changes(db, "create CustomRole")
    db.refresh(role)

    logger.info(
        f"Created custom role {role.name} with {len(role.permissions)} permission(s)"
    )
    event_bus.publish(
        AppEvent.ROLE_CREATED, {"role_id": str(role.id), "name": role.name}
    )

    return role


def update_custom_role(
    db: Session,
    role_id: uuid.UUID,
    data: CustomRoleUpdate,
    registry: PermissionRegistry = DEFAULT_REGISTRY,
) -> CustomRole:
    """Update a custom role's description or permissions."""
    role = get_custom_role(db, role_id)
    if not role:
        raise NotFoundError("Role not found")

    update_data = data.model_dump(exclude_unset=True)
    if "description" in update_data:
        role.description = update_data["description"]
    if update_data.get("permissions") is not None:
        role.permissions = _validated_permissions(update_data["permissions"], registry)

    commit_changes(db, "update CustomRole")
    db.refresh(role)

    event_bus.publish(AppEvent.ROLE_UPDATED, {"role_id": str(role.id)})

    return role


def delete_custom_role(db: Session, role_id: uuid.UUID) -> None:
    """Delete a custom role.

    Users still assigned to it keep the dangling reference and resolve to
    their system role defaults until reassigned.
    """
    role = get_custom_role(db, role_id)
    if not role:
        raise NotFoundError("Role not found")

    db.delete(role)
    commit_changes(db, "delete CustomRole")

    event_bus.publish(AppEvent.ROLE_DELETED, {"role_id": str(role_id)})


def assign_custom_role(
    db: Session, user_id: uuid.UUID, custom_role_id: uuid.UUID | None
) -> User:
    """Assign a custom role to a user, or clear it with None.

    The user's system role is left untouched.
    """
    user = user_service.get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    if custom_role_id is not None and not get_custom_role(db, custom_role_id):
        raise ReferenceNotFoundError(
            "Role not found", {"custom_role_id": str(custom_role_id)}
        )

    user.custom_role_id = custom_role_id
    commit_entity(db, user, "User")

    event_bus.publish(
        AppEvent.USER_ROLE_CHANGED,
        {
            "user_id": str(user.id),
            "role": user.role.value,
            "custom_role_id": str(custom_role_id) if custom_role_id else None,
        },
    )

    return user


def set_user_role(db: Session, user_id: uuid.UUID, role: UserRole) -> User:
    """Change a user's system role."""
    user = user_service.get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    previous_role = user.role
    user.role = role
    commit_entity(db, user, "User")

    logger.info(
        f"User {user.id} role changed from {previous_role.value} to {role.value}"
    )
    event_bus.publish(
        AppEvent.USER_ROLE_CHANGED,
        {"user_id": str(user.id), "from": previous_role.value, "role": role.value},
    )

    return user


def get_permission_engine(
    db: Session, registry: PermissionRegistry = DEFAULT_REGISTRY
) -> PermissionEngine:
    """Get a permission engine whose custom role lookup reads from ``db``."""
    return PermissionEngine(registry, lambda role_id: get_custom_role(db, role_id))


def get_user_permissions(
    db: Session, user: User, registry: PermissionRegistry = DEFAULT_REGISTRY
) -> frozenset[str]:
    """Get a user's effective permission set."""
    engine = get_permission_engine(db, registry)
    return engine.resolve_permissions(Principal.from_user(user))


def get_registered_permissions(
    registry: PermissionRegistry = DEFAULT_REGISTRY,
) -> list[dict[str, str | None]]:
    """Get every registered permission with its module and description."""
    return [
        {
            "code": code,
            "module": code.split(".", 1)[0],
            "description": registry.descriptions.get(code),
        }
        for code in sorted(registry.permissions)
    ]
