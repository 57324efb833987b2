# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from adminboard.api.deps import get_current_user, get_db
from adminboard.config import settings
from adminboard.models import User
from adminboard.schemas.auth import AuthResponse, LoginCodeRequest, VerifyCodeRequest
from adminboard.schemas.common import MessageResponse
from adminboard.schemas.user import UserResponse
from adminboard.services import auth_service, rbac_service

router = APIRouter()


def build_auth_response(db: Session, user: User) -> AuthResponse:
    """Build AuthResponse with the user's effective permissions."""
    permissions = rbac_service.get_user_permissions(db, user)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        permissions=sorted(permissions),
    )


@router.post(
    "/login-code",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
def request_login_code(
    data: LoginCodeRequest,
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Request a one-time login code.

    The answer is the same whether or not the address belongs to a user.
    """
    auth_service.request_login_code(db, data.email)
    return MessageResponse(
        message="If the address is registered, a login code has been sent"
    )


@router.post("/verify", response_model=AuthResponse)
def verify(
    data: VerifyCodeRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    """Exchange a login code for a session cookie."""
    user = auth_service.verify_login_code(db, data.email, data.code)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired code",
        )

    user_id = user.id
    token = auth_service.create_session(db, user_id)

    response.set_cookie(
        key="session",
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=86400 * settings.session_expiry_days,
    )

    # Re-query user after session creation commit to avoid expired object error
    user = auth_service.get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User not found after session creation",
        )

    return build_auth_response(db, user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    session: str | None = Cookie(default=None),
) -> None:
    """Logout current user."""
    if session:
        auth_service.delete_session(db, session)
    response.delete_cookie(key="session")


@router.get("/me", response_model=AuthResponse)
def get_current_user_info(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AuthResponse:
    """Get current authenticated user and their effective permissions."""
    return build_auth_response(db, current_user)
