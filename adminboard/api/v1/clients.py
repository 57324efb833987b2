# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Client API endpoints."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from adminboard.api.deps import get_db, get_organization_id, require_permission
from adminboard.exceptions import NotFoundError
from adminboard.models import Client, Project, User
from adminboard.schemas.client import (
    ClientCreate,
    ClientFilters,
    ClientResponse,
    ClientUpdate,
)
from adminboard.schemas.project import ProjectResponse
from adminboard.services import client_service, project_service

router = APIRouter()


@router.get("", response_model=list[ClientResponse])
def list_clients(
    search: str | None = Query(None),
    include_deleted: bool = Query(False),
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("clients.view")),
) -> list[Client]:
    """List clients of the current organization."""
    filters = ClientFilters(search=search, include_deleted=include_deleted)
    return client_service.get_clients(db, organization_id, filters)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(
    data: ClientCreate,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("clients.create")),
) -> Client:
    """Create a client."""
    return client_service.create_client(db, organization_id, data)


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(
    client_id: uuid.UUID,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("clients.view")),
) -> Client:
    """Get a client by ID."""
    client = client_service.get_client(db, organization_id, client_id)
    if not client:
        raise NotFoundError("Client not found")
    return client


@router.get("/{client_id}/projects", response_model=list[ProjectResponse])
def list_client_projects(
    client_id: uuid.UUID,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("projects.view")),
) -> list[Project]:
    """List a client's projects ordered by start date."""
    if not client_service.get_client(db, organization_id, client_id):
        raise NotFoundError("Client not found")
    return project_service.get_projects_by_client(db, organization_id, client_id)


@router.put("/{client_id}", response_model=ClientResponse)
def update_client(
    client_id: uuid.UUID,
    data: ClientUpdate,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("clients.edit")),
) -> Client:
    """Update a client. The body must carry the version last read."""
    return client_service.update_client(db, organization_id, client_id, data)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(
    client_id: uuid.UUID,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("clients.delete")),
) -> None:
    """Soft-delete a client. Its projects are kept and detached."""
    client_service.soft_delete_client(db, organization_id, client_id)


@router.post("/{client_id}/restore", response_model=ClientResponse)
def restore_client(
    client_id: uuid.UUID,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("clients.delete")),
) -> Client:
    """Restore a soft-deleted client."""
    return client_service.restore_client(db, organization_id, client_id)
