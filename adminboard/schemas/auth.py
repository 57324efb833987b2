# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""
from pydantic import BaseModel, EmailStr, Field

from adminboard.schemas.user import UserResponse


class LoginCodeRequest(BaseModel):
    """Request a one-time login code."""

    email: EmailStr


class VerifyCodeRequest(BaseModel):
    """Exchange a one-time login code for a session."""

    email: EmailStr
    code: str = Field(..., pattern=r"^\d{6}$")


class AuthResponse(BaseModel):
    """Authenticated user with effective permissions."""

    user: UserResponse
    permissions: list[str]
