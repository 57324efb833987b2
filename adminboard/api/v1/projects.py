# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Project API endpoints."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from adminboard.api.deps import get_db, get_organization_id, require_permission
from adminboard.exceptions import NotFoundError
from adminboard.models import Project, User
from adminboard.schemas.project import (
    ProjectCreate,
    ProjectFilters,
    ProjectResponse,
    ProjectStatusUpdate,
    ProjectUpdate,
)
from adminboard.services import project_service

router = APIRouter()


@router.get("", response_model=list[ProjectResponse])
def list_projects(
    filters: ProjectFilters = Depends(),
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("projects.view")),
) -> list[Project]:
    """List projects of the current organization ordered by name."""
    return project_service.get_projects(db, organization_id, filters)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    data: ProjectCreate,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("projects.create")),
) -> Project:
    """Create a project. New projects start in Planning."""
    return project_service.create_project(db, organization_id, data)


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: uuid.UUID,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("projects.view")),
) -> Project:
    """Get a project by ID."""
    project = project_service.get_project(db, organization_id, project_id)
    if not project:
        raise NotFoundError("Project not found")
    return project


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: uuid.UUID,
    data: ProjectUpdate,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("projects.edit")),
) -> Project:
    """Update a project. The body must carry the version last read."""
    return project_service.update_project(db, organization_id, project_id, data)


@router.patch("/{project_id}/status", response_model=ProjectResponse)
def update_project_status(
    project_id: uuid.UUID,
    data: ProjectStatusUpdate,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("projects.edit")),
) -> Project:
    """Move a project to another status."""
    return project_service.update_project_status(
        db, organization_id, project_id, data.status, data.version
    )


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: uuid.UUID,
    db: Session = Depends(get_db),
    organization_id: uuid.UUID = Depends(get_organization_id),
    current_user: User = Depends(require_permission("projects.delete")),
) -> None:
    """Delete a project permanently."""
    project_service.delete_project(db, organization_id, project_id)
