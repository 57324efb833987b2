# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for company_service."""

import uuid

import pytest

from adminboard.exceptions import (
    NotFoundError,
    ValidationFailedError,
    VersionConflictError,
)
from adminboard.schemas.company import CompanyCreate, CompanyUpdate
from adminboard.services import company_service


def test_create_and_get_company(db_session):
    company = company_service.create_company(db_session, CompanyCreate(name="Acme"))

    assert company.id is not None
    assert company.version == 1
    assert company_service.get_company(db_session, company.id) == company
    assert company_service.get_company_by_name(db_session, "Acme") == company
    companies, total = company_service.get_companies(db_session)
    assert total == 1
    assert companies == [company]


def test_create_duplicate_company(db_session):
    company_service.create_company(db_session, CompanyCreate(name="Acme"))

    with pytest.raises(ValidationFailedError):
        company_service.create_company(db_session, CompanyCreate(name="Acme"))


def test_get_companies_pagination_and_search(db_session):
    for name in ["Delta", "Alpha", "Charlie", "Bravo"]:
        company_service.create_company(db_session, CompanyCreate(name=name))

    page, total = company_service.get_companies(db_session, offset=1, limit=2)
    found, found_total = company_service.get_companies(db_session, search="arl")

    assert total == 4
    assert [c.name for c in page] == ["Bravo", "Charlie"]
    assert found_total == 1
    assert found[0].name == "Charlie"


def test_update_company(db_session):
    company = company_service.create_company(db_session, CompanyCreate(name="Acme"))

    updated = company_service.update_company(
        db_session, company.id, CompanyUpdate(name="Acme Corp")
    )

    assert updated.name == "Acme Corp"
    assert updated.version == 2


def test_update_company_version_gate(db_session):
    company = company_service.create_company(db_session, CompanyCreate(name="Acme"))
    company_service.update_company(
        db_session, company.id, CompanyUpdate(name="Acme 2", version=1)
    )

    with pytest.raises(VersionConflictError):
        company_service.update_company(
            db_session, company.id, CompanyUpdate(name="Acme 3", version=1)
        )


def test_update_company_to_taken_name(db_session):
    company_service.create_company(db_session, CompanyCreate(name="Acme"))
    other = company_service.create_company(db_session, CompanyCreate(name="Globex"))

    with pytest.raises(ValidationFailedError):
        company_service.update_company(db_session, other.id, CompanyUpdate(name="Acme"))


def test_update_missing_company(db_session):
    with pytest.raises(NotFoundError):
        company_service.update_company(db_session, uuid.uuid4(), CompanyUpdate())


def test_soft_delete_and_restore_company(db_session):
    company = company_service.create_company(db_session, CompanyCreate(name="Acme"))

    company_service.soft_delete_company(db_session, company.id)

    assert company_service.get_company(db_session, company.id) is None
    assert company_service.get_companies(db_session) == ([], 0)
    _, total = company_service.get_companies(db_session, include_deleted=True)
    assert total == 1
    with pytest.raises(ValidationFailedError):
        company_service.soft_delete_company(db_session, company.id)

    restored = company_service.restore_company(db_session, company.id)

    assert restored.deleted_at is None
    with pytest.raises(ValidationFailedError):
        company_service.restore_company(db_session, company.id)
