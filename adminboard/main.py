# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from adminboard import __version__
from adminboard.api.v1.router import api_router
from adminboard.config import settings
from adminboard.database import SessionLocal, engine
from adminboard.exceptions import (
    AdminboardError,
    ConnectionFailedError,
    InvalidTransitionError,
    NotFoundError,
    ReferenceNotFoundError,
    ValidationFailedError,
    VersionConflictError,
)
from adminboard.models import Base
from adminboard.schemas.common import ErrorResponse, HealthResponse
from adminboard.services import auth_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[AdminboardError], int] = {
    NotFoundError: 404,
    InvalidTransitionError: 409,
    VersionConflictError: 409,
    ValidationFailedError: 422,
    ReferenceNotFoundError: 422,
    ConnectionFailedError: 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        removed = auth_service.cleanup_expired_sessions(db)
        logger.info(f"Removed {removed} expired session(s)")
    finally:
        db.close()

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="Adminboard",
    description="Multi-tenant admin dashboard backend",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AdminboardError)
async def adminboard_error_handler(
    request: Request, exc: AdminboardError
) -> JSONResponse:
    """Translate domain errors into JSON error responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    if status_code >= 500:
        logger.error(
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}"
        )
    body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report database outages outside guarded commits as CONNECTION_FAILED."""
    logger.error(f"Database failure on {request.method} {request.url.path}: {exc}")
    error = ConnectionFailedError("Database unavailable")
    body = ErrorResponse(error=error.code, message=error.message, details=error.details)
    return JSONResponse(status_code=503, content=body.model_dump(mode="json"))


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


app.include_router(api_router, prefix="/api/v1")
