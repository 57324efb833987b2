# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Client service.

Clients belong to one organization. A client from another organization is
reported exactly like a missing one.
"""

import logging
import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from adminboard.events import AppEvent, event_bus
from adminboard.exceptions import NotFoundError, ValidationFailedError
from adminboard.lifecycle import check_version, commit_changes, commit_entity
from adminboard.models import Client, Project
from adminboard.schemas.client import ClientCreate, ClientFilters, ClientUpdate
from adminboard.services.tenancy import escape_like, require_organization

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = frozenset({"company_name", "contact_person", "email", "phone"})


def get_clients(
    db: Session,
    organization_id: uuid.UUID | None,
    filters: ClientFilters | None = None,
) -> list[Client]:
    """Get the clients of an organization ordered by company name."""
    organization_id = require_organization(organization_id)
    filters = filters or ClientFilters()

    query = db.query(Client).filter(Client.organization_id == organization_id)
    if not filters.include_deleted:
        query = query.filter(Client.deleted_at.is_(None))
    if filters.search:
        pattern = f"%{escape_like(filters.search)}%"
        query = query.filter(
            or_(
                Client.company_name.ilike(pattern, escape="\\"),
                Client.contact_person.ilike(pattern, escape="\\"),
            )
        )

    return query.order_by(Client.company_name.asc()).all()


def get_client(
    db: Session,
    organization_id: uuid.UUID | None,
    client_id: uuid.UUID,
    include_deleted: bool = False,
) -> Client | None:
    """Get a client by ID within an organization."""
    organization_id = require_organization(organization_id)
    query = db.query(Client).filter(
        Client.id == client_id,
        Client.organization_id == organization_id,
    )
    if not include_deleted:
        query = query.filter(Client.deleted_at.is_(None))
    return query.first()


def create_client(
    db: Session, organization_id: uuid.UUID | None, data: ClientCreate
) -> Client:
    """Create a new client."""
    organization_id = require_organization(organization_id)

    client = Client(organization_id=organization_id, **data.model_dump())
    db.add(client)
    commit_changes(db, "create Client")
    db.refresh(client)

    logger.info(f"Created client {client.id} in organization {organization_id}")
    event_bus.publish(
        AppEvent.CLIENT_CREATED,
        {"client_id": str(client.id), "organization_id": str(organization_id)},
    )

    return client


def update_client(
    db: Session,
    organization_id: uuid.UUID | None,
    client_id: uuid.UUID,
    data: ClientUpdate,
) -> Client:
    """Update a client if it is still at the version the caller read."""
    client = get_client(db, organization_id, client_id)
    if not client:
        raise NotFoundError("Client not found")

    check_version(client, data.version, "Client")

    update_data = data.model_dump(exclude_unset=True, exclude={"version"})
    for field, value in update_data.items():
        # Required columns cannot be cleared
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(client, field, value)

    commit_entity(db, client, "Client")

    event_bus.publish(
        AppEvent.CLIENT_UPDATED,
        {"client_id": str(client.id), "version": client.version},
    )

    return client


def soft_delete_client(
    db: Session, organization_id: uuid.UUID | None, client_id: uuid.UUID
) -> Client:
    """Soft-delete a client and detach its projects.

    Projects are kept; their client reference is cleared so they can be
    reassigned later.
    """
    client = get_client(db, organization_id, client_id, include_deleted=True)
    if not client:
        raise NotFoundError("Client not found")
    if client.deleted_at is not None:
        raise ValidationFailedError("Client already deleted")

    detached = (
        db.query(Project)
        .filter(
            Project.client_id == client.id,
            Project.organization_id == client.organization_id,
        )
        .update(
            {Project.client_id: None, Project.version: Project.version + 1},
            synchronize_session="fetch",
        )
    )
    client.deleted_at = datetime.utcnow()
    commit_entity(db, client, "Client")

    logger.info(f"Soft-deleted client {client.id}, detached {detached} project(s)")
    event_bus.publish(
        AppEvent.CLIENT_DELETED,
        {"client_id": str(client.id), "detached_projects": detached},
    )

    return client


def restore_client(
    db: Session, organization_id: uuid.UUID | None, client_id: uuid.UUID
) -> Client:
    """Restore a soft-deleted client. Detached projects stay detached."""
    client = get_client(db, organization_id, client_id, include_deleted=True)
    if not client:
        raise NotFoundError("Client not found")
    if client.deleted_at is None:
        raise ValidationFailedError("Client is not deleted")

    client.deleted_at = None
    commit_entity(db, client, "Client")

    event_bus.publish(AppEvent.CLIENT_RESTORED, {"client_id": str(client.id)})

    return client

