# File: media_scanner/api/app.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from media_scanner.core.config.settings import Settings
from media_scanner.features.os_opener.domain.interfaces import IOSOpener
from media_scanner.features.os_opener.service.api import get_opener

from .middleware import cors_middleware
from .routes import error_response, router

logger = logging.getLogger(__name__)


def create_app(settings: Settings, opener: Optional[IOSOpener] = None) -> FastAPI:
    """
    Builds the HTTP application around an already-loaded configuration.

    Args:
        settings: Immutable settings shared read-only by every request.
        opener: OS opener to use; defaults to the one for the running platform.
    """
    # Every non-/api/ GET belongs to the media streamer, so the docs routes are off
    app = FastAPI(title="Media Scanner", docs_url=None, redoc_url=None, openapi_url=None)

    app.state.settings = settings
    app.state.opener = opener or get_opener()

    app.middleware("http")(cors_middleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(router)
    return app


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Unknown paths and unsupported methods both answer 404 {"error": "Not found"}.
    """
    if exc.status_code in (404, 405):
        return error_response(404, "Not found")

    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))
