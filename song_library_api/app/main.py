"""
Main entrypoint for the Song Library API.

This module assembles the FastAPI application: it configures logging,
builds the database handle and the song store from an explicit
``Settings`` object, registers the error envelope handlers and the
request logging middleware, and mounts the versioned routers.  The
``create_app`` function builds the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn song_library_api.app.main:app --reload
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.db import Database
from .core.errors import ServiceError, WrongParameters
from .core.logging_config import ACCESS_LOGGER, setup_logging
from .services.song_service import PersistenceError, SongStore

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure into the ``{"error": {...}}`` envelope."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        error = WrongParameters()
        return JSONResponse(status_code=error.status_code, content=error.to_response())

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        # Backend detail was already logged by the store; the client only
        # gets the generic message.
        logger.warning("Store failure on %s %s: %s", request.method, request.url.path, exc)
        error = WrongParameters()
        return JSONResponse(status_code=error.status_code, content=error.to_response())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  When omitted it is read from the
        environment with ``Settings.from_env``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    if settings is None:
        settings = Settings.from_env()

    setup_logging(settings.log_level, settings.log_file)

    database = Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Using %s database %s (address %s)",
            settings.db_provider,
            database.path,
            settings.database_address,
        )
        database.init_db()
        yield
        logger.info("Application shutdown")

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = SongStore(database)

    access_logger = logging.getLogger(ACCESS_LOGGER)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        access_logger.info(
            "%s %s -> %s (%d ms)",
            request.method,
            request.url.path,
            response.status_code,
            int((time.perf_counter() - started) * 1000),
        )
        return response

    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
