# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"  # nosec - test-only secret  # noqa: S105
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from adminboard.api.deps import get_db
from adminboard.main import app
from adminboard.models import Company, User, UserRole
from adminboard.models.base import Base
from adminboard.services import auth_service

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(db_session):
    """Factory for additional sessions on the test database."""
    return TestingSessionLocal


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_company(db_session, name: str = "Acme") -> Company:
    """Helper to create a persisted company."""
    company = Company(name=name)
    db_session.add(company)
    db_session.commit()
    db_session.refresh(company)
    return company


def create_user(
    db_session,
    email: str,
    role: UserRole = UserRole.MEMBER,
    company: Company | None = None,
) -> User:
    """Helper to create a persisted user."""
    user = User(
        email=email,
        full_name=email.split("@")[0].title(),
        role=role,
        company_id=company.id if company else None,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def company(db_session) -> Company:
    """The organization most tests work in."""
    return create_company(db_session, "Acme")


@pytest.fixture
def other_company(db_session) -> Company:
    """A second organization for isolation tests."""
    return create_company(db_session, "Globex")


@pytest.fixture
def member_user(db_session, company) -> User:
    """Create a member of the test company."""
    return create_user(db_session, "member@example.com", UserRole.MEMBER, company)


@pytest.fixture
def admin_user(db_session, company) -> User:
    """Create an admin of the test company."""
    return create_user(db_session, "admin@example.com", UserRole.ADMIN, company)


@pytest.fixture
def superadmin_user(db_session, company) -> User:
    """Create a superadmin of the test company."""
    return create_user(
        db_session, "root@example.com", UserRole.SUPERADMIN, company
    )


@pytest.fixture
def login(client, db_session):
    """Return a function that signs the test client in as a user."""

    def _login(user: User) -> TestClient:
        token = auth_service.create_session(db_session, user.id)
        client.cookies.set("session", token)
        return client

    return _login


@pytest.fixture
def member_client(login, member_user):
    """Create an authenticated member test client."""
    return login(member_user)


@pytest.fixture
def admin_client(login, admin_user):
    """Create an authenticated admin test client."""
    return login(admin_user)


@pytest.fixture
def superadmin_client(login, superadmin_user):
    """Create an authenticated superadmin test client."""
    return login(superadmin_user)


@pytest.fixture
def make_company(db_session):
    """Return a function that creates companies."""
    return lambda name: create_company(db_session, name)


@pytest.fixture
def make_user(db_session):
    """Return a function that creates users."""

    def _make_user(
        email: str,
        role: UserRole = UserRole.MEMBER,
        company: Company | None = None,
    ) -> User:
        return create_user(db_session, email, role, company)

    return _make_user
