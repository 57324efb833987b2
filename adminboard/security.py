# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Token and one-time code helpers."""

import hashlib
import hmac
import secrets

from adminboard.config import settings

LOGIN_CODE_DIGITS = 6


def generate_login_code() -> str:
    """Generate a numeric one-time login code."""
    return f"{secrets.randbelow(10**LOGIN_CODE_DIGITS):0{LOGIN_CODE_DIGITS}d}"


def hash_login_code(email: str, code: str) -> str:
    """Digest a login code bound to the address it was issued for."""
    message = f"{email.lower()}:{code}".encode()
    return hmac.new(settings.secret_key.encode(), message, hashlib.sha256).hexdigest()


def verify_login_code(email: str, code: str, code_hash: str) -> bool:
    """Verify a login code against its stored digest."""
    return hmac.compare_digest(hash_login_code(email, code), code_hash)


def generate_session_token() -> str:
    """Generate an opaque session token."""
    return secrets.token_urlsafe(32)
