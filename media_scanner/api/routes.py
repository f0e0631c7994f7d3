# File: media_scanner/api/routes.py

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, JSONResponse, StreamingResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from media_scanner.core.common.paths import PathOutsideRootError, resolve_within_root
from media_scanner.core.config.settings import Settings
from media_scanner.features.media_streaming.data.file_reader import iter_file
from media_scanner.features.media_streaming.service.api import open_media, resolve_media
from media_scanner.features.os_opener.domain.interfaces import IOSOpener, OpenerError
from media_scanner.features.tree_scanner.service.scanner import scan_directory

from .schemas import ConfigResponse, ErrorResponse, OpenPathRequest, ScanResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()

CACHE_CONTROL = "public, max-age=3600"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_opener(request: Request) -> IOSOpener:
    return request.app.state.opener


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get("/api/config", response_model=ConfigResponse)
def read_config(settings: Settings = Depends(get_settings)):
    missing = settings.missing()
    if missing:
        return error_response(500, f"Missing required settings: {', '.join(missing)}")

    return ConfigResponse(port=settings.port, scan_path=str(settings.scan_path))


@router.get("/api/scan", response_model=ScanResponse)
def scan(settings: Settings = Depends(get_settings)):
    """
    Builds the media tree for the configured root. Runs in the threadpool
    since the walk blocks for as long as the tree takes to read.
    """
    if settings.scan_path is None:
        return error_response(500, "SCAN_PATH is not configured")

    result = scan_directory(settings.scan_path, settings.max_depth, settings.ignored_dirs)
    return ScanResponse.from_result(result)


@router.post("/api/open-file", response_model=SuccessResponse)
async def open_file(request: Request):
    return await _open_path(request, folder=False)


@router.post("/api/open-folder", response_model=SuccessResponse)
async def open_folder(request: Request):
    return await _open_path(request, folder=True)


async def _open_path(request: Request, folder: bool):
    settings = get_settings(request)
    opener = get_opener(request)
    noun = "folder" if folder else "file"

    body = await request.body()
    try:
        payload = OpenPathRequest.model_validate_json(body)
    except ValidationError as e:
        logger.error(f"Error parsing open-{noun} request: {e.errors()[0]['msg']}")
        return error_response(400, "Invalid request")

    if settings.scan_path is None:
        return error_response(500, "SCAN_PATH is not configured")

    try:
        target = resolve_within_root(settings.scan_path, payload.path)
    except PathOutsideRootError as e:
        logger.warning(str(e))
        return error_response(400, "Invalid path")

    action = opener.reveal_folder if folder else opener.open_file
    try:
        await run_in_threadpool(action, target)
    except OpenerError as e:
        logger.error(f"Error opening {noun}: {e}")
        return error_response(500, f"Failed to open {noun}")

    return SuccessResponse()


@router.get("/", include_in_schema=False)
@router.get("/index.html", include_in_schema=False)
def landing_page(settings: Settings = Depends(get_settings)):
    index = Path(settings.index_html)
    if not index.is_file():
        return error_response(404, "Not found")
    return FileResponse(index, media_type="text/html")


@router.get("/{media_path:path}", include_in_schema=False)
def stream_media(media_path: str, settings: Settings = Depends(get_settings)):
    if media_path.startswith("api/"):
        return error_response(404, "Not found")
    if settings.scan_path is None:
        return error_response(500, "SCAN_PATH is not configured")

    try:
        target = resolve_media(settings.scan_path, media_path)
        handle, size = open_media(target)
    except PathOutsideRootError as e:
        logger.warning(str(e))
        return error_response(404, "File not found")
    except FileNotFoundError:
        return error_response(404, "File not found")
    except OSError as e:
        logger.error(f"Cannot open media {media_path}: {e}")
        return error_response(500, "Internal server error")

    return StreamingResponse(
        iter_file(handle),
        media_type=target.content_type,
        headers={"Cache-Control": CACHE_CONTROL, "Content-Length": str(size)},
    )
