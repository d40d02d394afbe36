"""
Main entrypoint for the Album API.

This module assembles the FastAPI application, sets up logging,
creates the album service and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn album_api.app.main:app --port 8080
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import log_requests
from .core.responses import response_class_for
from .services.album_service import AlbumService

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "invalid album payload"
INTERNAL_ERROR = "internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting %s %s with %d albums",
        app.title,
        app.version,
        app.state.album_service.count,
    )
    yield
    logger.info("Shutting down %s", app.title)


def create_app(
    settings: Optional[Settings] = None,
    album_service: Optional[AlbumService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use.  Defaults to the module-level settings read
        from the environment.
    album_service : Optional[AlbumService]
        Service holding the album collection.  When omitted a new
        service is created, seeded or empty according to
        ``settings.seed_albums``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None, access_log=settings.access_log)

    response_class = response_class_for(settings.indent_json)
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        default_response_class=response_class,
        lifespan=lifespan,
    )

    if album_service is None:
        album_service = AlbumService() if settings.seed_albums else AlbumService(albums=[])
    app.state.album_service = album_service
    app.state.settings = settings

    app.middleware("http")(log_requests)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Bodies that fail to decode are answered with 400, never stored.
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, errors)
        return response_class(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_PAYLOAD, "errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return response_class(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return response_class(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR},
        )

    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
