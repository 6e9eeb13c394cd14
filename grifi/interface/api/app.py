"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from grifi.config import Settings
from grifi.domain.error import (
    ConcurrencyConflictError,
    DomainError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from grifi.interface.api.routes import (
    campaigns,
    collabs,
    connections,
    health,
    messages,
    profiles,
)
from grifi.interface.api.viewer import ViewerProvider
from grifi.interface.error import UnauthorizedError
from grifi.util.di.container import create_container, setup_di
from grifi.util.observability import instrument_fastapi

# Checked in order; subclasses before their bases
_DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (ConcurrencyConflictError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown domain errors are 400."""
    for error_type, code in _DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    logfire.warn(
        "Domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=code,
    )
    return JSONResponse(status_code=code, content={"detail": str(exc)})


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to use instead of the production one

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Grifi API",
        description="Backend API for Grifi - collaboration requests, connections and direct messages between creators and brands",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Next.js dev server
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    if container is None:
        container = create_container(ViewerProvider())
    setup_di(app_instance, container)

    app_instance.add_exception_handler(DomainError, domain_error_handler)
    app_instance.add_exception_handler(UnauthorizedError, unauthorized_handler)

    app_instance.include_router(health.router)
    app_instance.include_router(collabs.router)
    app_instance.include_router(profiles.router)
    app_instance.include_router(connections.router)
    app_instance.include_router(messages.router)
    app_instance.include_router(campaigns.router)
    app_instance.include_router(campaigns.applications_router)

    return app_instance
