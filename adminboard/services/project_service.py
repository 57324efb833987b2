# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Project service.

Every mutating write goes through the project lifecycle guard. For an
update the checks run in a fixed order: the project must exist in the
organization, the status change must be legal, a new client reference must
resolve to an active client of the same organization, and the caller's
version must match. Only then is the row written.
"""

import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from adminboard.events import AppEvent, event_bus
from adminboard.exceptions import (
    NotFoundError,
    ReferenceNotFoundError,
    ValidationFailedError,
)
from adminboard.lifecycle import LifecycleGuard, commit_changes, project_guard
from adminboard.models import Project, ProjectStatus
from adminboard.schemas.project import ProjectCreate, ProjectFilters, ProjectUpdate
from adminboard.services import client_service
from adminboard.services.tenancy import escape_like, require_organization

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = frozenset({"name", "start_date", "status"})


def get_projects(
    db: Session,
    organization_id: uuid.UUID | None,
    filters: ProjectFilters | None = None,
) -> list[Project]:
    """Get the projects of an organization ordered by name."""
    organization_id = require_organization(organization_id)
    filters = filters or ProjectFilters()

    query = db.query(Project).filter(Project.organization_id == organization_id)
    if filters.search:
        pattern = f"%{escape_like(filters.search)}%"
        query = query.filter(
            or_(
                Project.name.ilike(pattern, escape="\\"),
                Project.description.ilike(pattern, escape="\\"),
            )
        )
    if filters.client_id:
        query = query.filter(Project.client_id == filters.client_id)
    if filters.status:
        query = query.filter(Project.status == filters.status)
    if filters.start_date_from:
        query = query.filter(Project.start_date >= filters.start_date_from)
    if filters.start_date_to:
        query = query.filter(Project.start_date <= filters.start_date_to)
    if filters.end_date_from:
        query = query.filter(Project.end_date >= filters.end_date_from)
    if filters.end_date_to:
        query = query.filter(Project.end_date <= filters.end_date_to)

    return query.order_by(Project.name.asc()).all()


def get_projects_by_client(
    db: Session, organization_id: uuid.UUID | None, client_id: uuid.UUID
) -> list[Project]:
    """Get a client's projects ordered by start date."""
    organization_id = require_organization(organization_id)
    return (
        db.query(Project)
        .filter(
            Project.organization_id == organization_id,
            Project.client_id == client_id,
        )
        .order_by(Project.start_date.asc())
        .all()
    )


def get_project(
    db: Session, organization_id: uuid.UUID | None, project_id: uuid.UUID
) -> Project | None:
    """Get a project by ID within an organization."""
    organization_id = require_organization(organization_id)
    return (
        db.query(Project)
        .filter(
            Project.id == project_id,
            Project.organization_id == organization_id,
        )
        .first()
    )


def _require_active_client(
    db: Session, organization_id: uuid.UUID, client_id: uuid.UUID
) -> None:
    if not client_service.get_client(db, organization_id, client_id):
        raise ReferenceNotFoundError(
            "Client not found", {"client_id": str(client_id)}
        )


def create_project(
    db: Session, organization_id: uuid.UUID | None, data: ProjectCreate
) -> Project:
    """Create a new project in the Planning state."""
    organization_id = require_organization(organization_id)
    if data.client_id is not None:
        _require_active_client(db, organization_id, data.client_id)

    project = Project(
        organization_id=organization_id,
        status=project_guard.transitions.initial,
        **data.model_dump(),
    )
    db.add(project)
    commit_changes(db, "create Project")
    db.refresh(project)

    logger.info(f"Created project {project.id} in organization {organization_id}")
    event_bus.publish(
        AppEvent.PROJECT_CREATED,
        {"project_id": str(project.id), "organization_id": str(organization_id)},
    )

    return project


def update_project(
    db: Session,
    organization_id: uuid.UUID | None,
    project_id: uuid.UUID,
    data: ProjectUpdate,
    guard: LifecycleGuard[ProjectStatus] = project_guard,
) -> Project:
    """Update a project if it is still at the version the caller read."""
    project = get_project(db, organization_id, project_id)
    if not project:
        raise NotFoundError("Project not found")

    update_data = {
        field: value
        for field, value in data.model_dump(
            exclude_unset=True, exclude={"version"}
        ).items()
        if value is not None or field not in _REQUIRED_FIELDS
    }

    start_date = update_data.get("start_date", project.start_date)
    end_date = update_data.get("end_date", project.end_date)
    if end_date is not None and end_date < start_date:
        raise ValidationFailedError(
            "End date must be greater than or equal to start date"
        )

    previous_status = project.status
    new_status = update_data.get("status", previous_status)
    guard.check_transition(previous_status, new_status)

    new_client_id = update_data.get("client_id")
    if new_client_id is not None and new_client_id != project.client_id:
        _require_active_client(db, project.organization_id, new_client_id)

    guard.check_version(project, data.version)

    for field, value in update_data.items():
        setattr(project, field, value)
    guard.commit(db, project)

    event_bus.publish(
        AppEvent.PROJECT_UPDATED,
        {"project_id": str(project.id), "version": project.version},
    )
    if new_status != previous_status:
        _publish_status_change(project, previous_status)

    return project


def update_project_status(
    db: Session,
    organization_id: uuid.UUID | None,
    project_id: uuid.UUID,
    status: ProjectStatus,
    expected_version: int,
    guard: LifecycleGuard[ProjectStatus] = project_guard,
) -> Project:
    """Move a project to a new status."""
    project = get_project(db, organization_id, project_id)
    if not project:
        raise NotFoundError("Project not found")

    previous_status = project.status
    guard.check_transition(previous_status, status)
    guard.check_version(project, expected_version)

    project.status = status
    guard.commit(db, project)

    if status != previous_status:
        _publish_status_change(project, previous_status)

    return project


def _publish_status_change(project: Project, previous_status: ProjectStatus) -> None:
    logger.info(
        f"Project {project.id} moved from {previous_status.value} "
        f"to {project.status.value}"
    )
    event_bus.publish(
        AppEvent.PROJECT_STATUS_CHANGED,
        {
            "project_id": str(project.id),
            "from": previous_status.value,
            "to": project.status.value,
        },
    )


def delete_project(
    db: Session, organization_id: uuid.UUID | None, project_id: uuid.UUID
) -> None:
    """Delete a project permanently."""
    project = get_project(db, organization_id, project_id)
    if not project:
        raise NotFoundError("Project not found")

    db.delete(project)
    commit_changes(db, "delete Project")

    event_bus.publish(AppEvent.PROJECT_DELETED, {"project_id": str(project_id)})
