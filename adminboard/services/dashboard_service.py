# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Dashboard service for aggregated summary data."""

import uuid
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from adminboard.models import Client, Project, ProjectStatus
from adminboard.schemas.dashboard import (
    DashboardOverview,
    ProjectsByStatus,
    UpcomingProject,
)
from adminboard.services.tenancy import require_organization

_STATUS_FIELDS = {
    ProjectStatus.PLANNING: "planning",
    ProjectStatus.ACTIVE: "active",
    ProjectStatus.ON_HOLD: "on_hold",
    ProjectStatus.COMPLETED: "completed",
    ProjectStatus.CANCELLED: "cancelled",
}


def get_projects_by_status(
    db: Session, organization_id: uuid.UUID | None
) -> ProjectsByStatus:
    """Get count of projects per status for an organization."""
    organization_id = require_organization(organization_id)

    counts = (
        db.query(Project.status, func.count(Project.id))
        .filter(Project.organization_id == organization_id)
        .group_by(Project.status)
        .all()
    )

    result = ProjectsByStatus()
    for status, count in counts:
        setattr(result, _STATUS_FIELDS[status], count)
    return result


def get_active_client_count(db: Session, organization_id: uuid.UUID | None) -> int:
    """Count the clients of an organization that are not deleted."""
    organization_id = require_organization(organization_id)
    return (
        db.query(func.count(Client.id))
        .filter(
            Client.organization_id == organization_id,
            Client.deleted_at.is_(None),
        )
        .scalar()
    )


def get_total_budget(db: Session, organization_id: uuid.UUID | None) -> int:
    """Sum the budgets (in cents) of all projects that are not cancelled."""
    organization_id = require_organization(organization_id)
    total = (
        db.query(func.coalesce(func.sum(Project.budget), 0))
        .filter(
            Project.organization_id == organization_id,
            Project.status != ProjectStatus.CANCELLED,
        )
        .scalar()
    )
    return int(total)


def get_upcoming_projects(
    db: Session,
    organization_id: uuid.UUID | None,
    limit: int = 5,
    now: datetime | None = None,
) -> list[UpcomingProject]:
    """Get projects that start in the future, soonest first.

    Cancelled and completed projects are left out.
    """
    organization_id = require_organization(organization_id)
    now = now or datetime.utcnow()

    projects = (
        db.query(Project)
        .options(joinedload(Project.client))
        .filter(Project.organization_id == organization_id)
        .filter(Project.start_date >= now)
        .filter(
            Project.status.notin_([ProjectStatus.CANCELLED, ProjectStatus.COMPLETED])
        )
        .order_by(Project.start_date.asc())
        .limit(limit)
        .all()
    )

    return [
        UpcomingProject(
            id=project.id,
            name=project.name,
            client_name=(
                project.client.company_name
                if project.client and project.client.deleted_at is None
                else None
            ),
            status=project.status,
            start_date=project.start_date,
            days_until=(project.start_date.date() - now.date()).days,
        )
        for project in projects
    ]


def get_overview(
    db: Session, organization_id: uuid.UUID | None, upcoming_limit: int = 5
) -> DashboardOverview:
    """Get the complete dashboard overview for an organization."""
    return DashboardOverview(
        projects_by_status=get_projects_by_status(db, organization_id),
        active_clients=get_active_client_count(db, organization_id),
        total_budget=get_total_budget(db, organization_id),
        upcoming_projects=get_upcoming_projects(db, organization_id, upcoming_limit),
    )
