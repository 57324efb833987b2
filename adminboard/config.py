# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings.

    Values are read from the environment (or a local ``.env`` file), e.g.
    ``DATABASE_URL=postgresql+psycopg://...``.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./adminboard.db"
    secret_key: str = Field(
        default="change-me-in-production-please-32chars",
        min_length=32,
    )
    log_level: str = "INFO"
    session_expiry_days: int = 7
    login_code_ttl_minutes: int = 10
    login_code_max_attempts: int = 5
    session_cookie_secure: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]


settings = Settings()
