# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Company API endpoints."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from adminboard.api.deps import get_db, require_permission
from adminboard.exceptions import NotFoundError
from adminboard.models import Company, User
from adminboard.schemas.common import PaginatedResponse, PaginationMeta
from adminboard.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from adminboard.services import company_service

router = APIRouter()


@router.get("", response_model=PaginatedResponse[CompanyResponse])
def list_companies(
    search: str | None = Query(None),
    include_deleted: bool = Query(False),
    offset: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("companies.view")),
) -> PaginatedResponse[CompanyResponse]:
    """List companies."""
    companies, total = company_service.get_companies(
        db,
        search=search,
        include_deleted=include_deleted,
        offset=offset,
        limit=limit,
    )
    return PaginatedResponse[CompanyResponse](
        data=[CompanyResponse.model_validate(c) for c in companies],
        meta=PaginationMeta(total=total, offset=offset, limit=limit),
    )


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    data: CompanyCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("companies.create")),
) -> Company:
    """Create a new company."""
    return company_service.create_company(db, data)


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("companies.view")),
) -> Company:
    """Get a company by ID."""
    company = company_service.get_company(db, company_id)
    if not company:
        raise NotFoundError("Company not found")
    return company


@router.put("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: uuid.UUID,
    data: CompanyUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("companies.edit")),
) -> Company:
    """Update a company."""
    return company_service.update_company(db, company_id, data)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("companies.delete")),
) -> None:
    """Soft-delete a company."""
    company_service.soft_delete_company(db, company_id)


@router.post("/{company_id}/restore", response_model=CompanyResponse)
def restore_company(
    company_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("companies.delete")),
) -> Company:
    """Restore a soft-deleted company."""
    return company_service.restore_company(db, company_id)
