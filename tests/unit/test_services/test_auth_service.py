# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

from datetime import datetime, timedelta

from adminboard.config import settings
from adminboard.models import LoginCode
from adminboard.models.session import Session as SessionModel
from adminboard.services import auth_service, user_service


def test_request_login_code_for_known_user(db_session, member_user):
    code = auth_service.request_login_code(db_session, "MEMBER@example.com")

    assert code is not None
    assert len(code) == 6
    assert code.isdigit()
    stored = db_session.query(LoginCode).one()
    assert stored.email == "member@example.com"
    assert stored.code_hash != code


def test_request_login_code_for_unknown_user(db_session):
    assert auth_service.request_login_code(db_session, "nobody@example.com") is None
    assert db_session.query(LoginCode).count() == 0


def test_request_login_code_for_deleted_user(db_session, member_user):
    user_service.soft_delete_user(db_session, member_user.id)
    assert auth_service.request_login_code(db_session, member_user.email) is None


def test_new_code_replaces_previous(db_session, member_user):
    first = auth_service.request_login_code(db_session, member_user.email)
    second = auth_service.request_login_code(db_session, member_user.email)

    assert db_session.query(LoginCode).count() == 1
    if first != second:
        stale = auth_service.verify_login_code(db_session, member_user.email, first)
        assert stale is None
    assert auth_service.verify_login_code(db_session, member_user.email, second) == (
        member_user
    )


def test_verify_login_code_is_single_use(db_session, member_user):
    code = auth_service.request_login_code(db_session, member_user.email)

    assert auth_service.verify_login_code(db_session, member_user.email, code) == (
        member_user
    )
    assert auth_service.verify_login_code(db_session, member_user.email, code) is None


def test_verify_login_code_wrong_code(db_session, member_user):
    code = auth_service.request_login_code(db_session, member_user.email)
    wrong = "000000" if code != "000000" else "111111"

    assert auth_service.verify_login_code(db_session, member_user.email, wrong) is None


def test_verify_login_code_is_bound_to_email(db_session, member_user, admin_user):
    code = auth_service.request_login_code(db_session, member_user.email)

    assert auth_service.verify_login_code(db_session, admin_user.email, code) is None


def test_verify_expired_login_code(db_session, member_user):
    code = auth_service.request_login_code(db_session, member_user.email)
    stored = db_session.query(LoginCode).one()
    stored.expires_at = datetime.utcnow() - timedelta(minutes=1)
    db_session.commit()

    assert auth_service.verify_login_code(db_session, member_user.email, code) is None


def test_session_lifecycle(db_session, member_user):
    token = auth_service.create_session(db_session, member_user.id)

    session = auth_service.get_session(db_session, token)
    assert session is not None
    assert session.user_id == member_user.id

    assert auth_service.delete_session(db_session, token) is True
    assert auth_service.get_session(db_session, token) is None
    assert auth_service.delete_session(db_session, token) is False


def test_expired_session_is_removed(db_session, member_user):
    token = auth_service.create_session(db_session, member_user.id)
    session = db_session.query(SessionModel).filter_by(token=token).one()
    session.expires_at = datetime.utcnow() - timedelta(seconds=1)
    db_session.commit()

    assert auth_service.get_session(db_session, token) is None
    assert db_session.query(SessionModel).count() == 0


def test_cleanup_expired_sessions(db_session, member_user):
    expired = SessionModel(
        user_id=member_user.id,
        token="expired-token",
        expires_at=datetime.utcnow() - timedelta(days=1),
    )
    db_session.add(expired)
    db_session.commit()
    auth_service.create_session(db_session, member_user.id)

    assert auth_service.cleanup_expired_sessions(db_session) == 1
    assert db_session.query(SessionModel).count() == 1


def test_user_lookups(db_session, member_user):
    assert auth_service.get_user_by_id(db_session, member_user.id) == member_user
    assert auth_service.get_user_by_email(db_session, "Member@Example.com") == (
        member_user
    )
    assert auth_service.get_user_by_email(db_session, "nobody@example.com") is None


def wrong_code_for(code: str) -> str:
    return f"{(int(code) + 1) % 1_000_000:06d}"


def test_code_is_burned_after_too_many_wrong_guesses(db_session, member_user):
    code = auth_service.request_login_code(db_session, member_user.email)
    wrong = wrong_code_for(code)

    for _ in range(settings.login_code_max_attempts):
        result = auth_service.verify_login_code(db_session, member_user.email, wrong)
        assert result is None

    assert db_session.query(LoginCode).one().failed_attempts == (
        settings.login_code_max_attempts
    )
    assert auth_service.verify_login_code(db_session, member_user.email, code) is None


def test_code_survives_fewer_wrong_guesses(db_session, member_user):
    code = auth_service.request_login_code(db_session, member_user.email)
    wrong = wrong_code_for(code)

    for _ in range(settings.login_code_max_attempts - 1):
        auth_service.verify_login_code(db_session, member_user.email, wrong)

    assert auth_service.verify_login_code(db_session, member_user.email, code) == (
        member_user
    )


def test_new_code_resets_attempts(db_session, member_user):
    code = auth_service.request_login_code(db_session, member_user.email)
    wrong = wrong_code_for(code)
    for _ in range(settings.login_code_max_attempts):
        auth_service.verify_login_code(db_session, member_user.email, wrong)

    code = auth_service.request_login_code(db_session, member_user.email)

    assert auth_service.verify_login_code(db_session, member_user.email, code) == (
        member_user
    )
