# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Company service. Companies are the organizations that own clients and projects."""

import logging
import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from adminboard.events import AppEvent, event_bus
from adminboard.exceptions import NotFoundError, ValidationFailedError
from adminboard.lifecycle import check_version, commit_changes, commit_entity
from adminboard.models import Company
from adminboard.schemas.company import CompanyCreate, CompanyUpdate
from adminboard.services.tenancy import escape_like

logger = logging.getLogger(__name__)


def get_companies(
    db: Session,
    search: str | None = None,
    include_deleted: bool = False,
    offset: int = 0,
    limit: int = 50,
) -> tuple[list[Company], int]:
    """Get a page of companies ordered by name, plus the total count."""
    query = db.query(Company)
    if not include_deleted:
        query = query.filter(Company.deleted_at.is_(None))
    if search:
        query = query.filter(
            Company.name.ilike(f"%{escape_like(search)}%", escape="\\")
        )

    total = query.count()
    companies = query.order_by(Company.name.asc()).offset(offset).limit(limit).all()
    return companies, total


def get_company(
    db: Session, company_id: uuid.UUID, include_deleted: bool = False
) -> Company | None:
    """Get a company by ID."""
    query = db.query(Company).filter(Company.id == company_id)
    if not include_deleted:
        query = query.filter(Company.deleted_at.is_(None))
    return query.first()


def get_company_by_name(db: Session, name: str) -> Company | None:
    """Get a company by name, deleted or not."""
    return db.query(Company).filter(Company.name == name).first()


def create_company(db: Session, data: CompanyCreate) -> Company:
    """Create a new company."""
    if get_company_by_name(db, data.name):
        raise ValidationFailedError("Company with this name already exists")

    company = Company(name=data.name)
    db.add(company)
    commit_changes(db, "create Company")
    db.refresh(company)

    event_bus.publish(
        AppEvent.COMPANY_CREATED,
        {"company_id": str(company.id), "name": company.name},
    )

    return company


def update_company(db: Session, company_id: uuid.UUID, data: CompanyUpdate) -> Company:
    """Update a company. The version check only applies when one is supplied."""
    company = get_company(db, company_id)
    if not company:
        raise NotFoundError("Company not found")

    check_version(company, data.version, "Company")

    if data.name is not None and data.name != company.name:
        existing = get_company_by_name(db, data.name)
        if existing and existing.id != company.id:
            raise ValidationFailedError("Company with this name already exists")
        company.name = data.name

    commit_entity(db, company, "Company")

    event_bus.publish(AppEvent.COMPANY_UPDATED, {"company_id": str(company.id)})

    return company


def soft_delete_company(db: Session, company_id: uuid.UUID) -> Company:
    """Soft-delete a company."""
    company = get_company(db, company_id, include_deleted=True)
    if not company:
        raise NotFoundError("Company not found")
    if company.deleted_at is not None:
        raise ValidationFailedError("Company already deleted")

    company.deleted_at = datetime.utcnow()
    commit_entity(db, company, "Company")

    logger.info(f"Soft-deleted company {company.id}")
    event_bus.publish(AppEvent.COMPANY_DELETED, {"company_id": str(company.id)})

    return company


def restore_company(db: Session, company_id: uuid.UUID) -> Company:
    """Restore a soft-deleted company."""
    company = get_company(db, company_id, include_deleted=True)
    if not company:
        raise NotFoundError("Company not found")
    if company.deleted_at is None:
        raise ValidationFailedError("Company is not deleted")

    company.deleted_at = None
    commit_entity(db, company, "Company")

    event_bus.publish(AppEvent.COMPANY_UPDATED, {"company_id": str(company.id)})

    return company
