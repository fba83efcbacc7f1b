"""
Main entrypoint for the City Info API.

This module assembles the FastAPI application: it sets up logging,
chooses the City/POI store and the mail service from the settings,
registers the error handlers and includes the API router under
``/api``.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn city_info_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.exceptions import (
    GENERIC_ERROR_MESSAGE,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from .core.logging_config import setup_logging
from .repositories import create_repository_factory
from .services.mail_service import get_mail_service

logger = logging.getLogger(__name__)


def _request_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    """Group FastAPI request validation errors by the offending field."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value."))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Map service errors to HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.errors or exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # An id that is not a number can never match a stored resource.
        errors = exc.errors()
        if errors and all(error.get("loc", ("",))[0] == "path" for error in errors):
            logger.info("No resource matches %s", request.url.path)
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"})
        logger.info("Rejected malformed request to %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _request_errors(exc)},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("%s (%s %s)", exc, request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": GENERIC_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def unexpected_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.critical(
            "Unhandled exception for %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": GENERIC_ERROR_MESSAGE},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment
        at import time.  Tests pass their own to pick a store backend
        and database file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that the store and mail setup below can log.
    setup_logging(settings.log_level, settings.log_file or None, settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.repository_factory = create_repository_factory(settings)
    app.state.mail_service = get_mail_service(settings)
    logger.info(
        "Using %s store and %s mail service",
        settings.store_backend,
        type(app.state.mail_service).__name__,
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
