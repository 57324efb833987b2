# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service.

Sign-in is passwordless: a one-time code is issued for a known, active user
and exchanged for a session token.
"""

import logging
import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from adminboard.config import settings
from adminboard.events import AppEvent, event_bus
from adminboard.lifecycle import commit_changes
from adminboard.models import LoginCode, User
from adminboard.models.session import Session as SessionModel
from adminboard.security import (
    generate_login_code,
    generate_session_token,
    hash_login_code,
)
from adminboard.security import verify_login_code as code_matches

logger = logging.getLogger(__name__)


def request_login_code(db: Session, email: str) -> str | None:
    """Issue a login code for an active user.

    Returns the plain code, or None when no active user has this email.
    Earlier unused codes for the address are invalidated.
    """
    email = email.lower()
    user = get_user_by_email(db, email)
    if not user or not user.is_active:
        logger.info(f"Login code requested for unknown or inactive address {email}")
        return None

    db.query(LoginCode).filter(
        LoginCode.email == email, LoginCode.consumed_at.is_(None)
    ).delete()

    code = generate_login_code()
    db.add(
        LoginCode(
            email=email,
            code_hash=hash_login_code(email, code),
            expires_at=datetime.utcnow()
            + timedelta(minutes=settings.login_code_ttl_minutes),
        )
    )
    commit_changes(db, "issue login code")

    logger.debug(f"Login code for {email}: {code}")
    return code


def verify_login_code(db: Session, email: str, code: str) -> User | None:
    """Consume a login code and return its user, or None if it is not valid.

    Every wrong guess counts against the outstanding codes of the address;
    a code stops working after ``settings.login_code_max_attempts`` misses.
    """
    email = email.lower()
    now = datetime.utcnow()
    candidates = (
        db.query(LoginCode)
        .filter(
            LoginCode.email == email,
            LoginCode.consumed_at.is_(None),
            LoginCode.expires_at > now,
            LoginCode.failed_attempts < settings.login_code_max_attempts,
        )
        .all()
    )
    login_code = next(
        (c for c in candidates if code_matches(email, code, c.code_hash)), None
    )
    if not login_code:
        if candidates:
            for candidate in candidates:
                candidate.failed_attempts += 1
            commit_changes(db, "record failed login attempt")
            logger.warning(f"Wrong login code for {email}")
        return None

    user = get_user_by_email(db, email)
    if not user or not user.is_active:
        return None

    login_code.consumed_at = now
    commit_changes(db, "consume login code")
    return user


def create_session(db: Session, user_id: uuid.UUID) -> str:
    """Create a new session for a user."""
    token = generate_session_token()
    expires_at = datetime.utcnow() + timedelta(days=settings.session_expiry_days)

    session = SessionModel(
        user_id=user_id,
        token=token,
        expires_at=expires_at,
    )
    db.add(session)
    commit_changes(db, "create session")

    event_bus.publish(AppEvent.USER_LOGIN, {"user_id": str(user_id)})

    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.expires_at < datetime.utcnow():
        db.delete(session)
        commit_changes(db, "remove expired session")
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if session:
        user_id = session.user_id
        db.delete(session)
        commit_changes(db, "delete session")
        event_bus.publish(AppEvent.USER_LOGOUT, {"user_id": str(user_id)})
        return True
    return False


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email.lower()).first()


def cleanup_expired_sessions(db: Session) -> int:
    """Delete expired sessions and login codes. Returns count of deleted sessions."""
    now = datetime.utcnow()
    count = db.query(SessionModel).filter(SessionModel.expires_at < now).delete()
    db.query(LoginCode).filter(LoginCode.expires_at < now).delete()
    commit_changes(db, "clean up expired sessions")
    return count
