"""
Main entrypoint for the User Vault API.

This module assembles the FastAPI application: it sets up logging,
wires the repository into the ``UserService``, registers the exception
handlers that map error kinds to HTTP statuses, and includes the
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn user_vault_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import init_db, resolve_database_path
from .core.exceptions import NotFoundError, StoreError, UserVaultError, ValidationError
from .core.logging_config import setup_logging
from .core.middleware import RequestLoggingMiddleware
from .repositories.base import UserRepository
from .repositories.sqlite import SQLiteUserRepository
from .services.user_service import UserService

logger = logging.getLogger(__name__)

# The only place where error kinds meet HTTP status codes.
ERROR_STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _request_error_message(exc: RequestValidationError) -> str:
    """Name the part of the request FastAPI could not parse."""
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc and loc[0] == "path":
            return "invalid id"
        if len(loc) > 1 and loc[0] == "query":
            return f"invalid {loc[1]}"
    return "invalid request body"


async def handle_user_vault_error(request: Request, exc: UserVaultError) -> JSONResponse:
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_type, code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            status_code = code
            break
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _request_error_message(exc)
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal server error"},
    )


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the values read from the
        environment by ``core.config``.
    repository : Optional[UserRepository]
        Store adapter to wire into the service.  When omitted, a
        ``SQLiteUserRepository`` is built from ``settings.database_url``
        and the schema is migrated on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    database_path = None
    if repository is None:
        database_path = resolve_database_path(settings.database_url)
        repository = SQLiteUserRepository(database_path)

    app.state.settings = settings
    app.state.database_path = database_path
    app.state.user_service = UserService(repository)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(UserVaultError, handle_user_vault_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        if database_path is None:
            logger.info("Using %s, no migrations to apply", type(repository).__name__)
            return
        # Creates the database file if needed and fails startup when the
        # store cannot be reached.
        try:
            init_db(database_path)
        except Exception:
            logger.exception("Failed to initialise database %s", database_path)
            raise
        logger.info("Database ready at %s", database_path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
