import os
from pathlib import Path
from typing import BinaryIO, Tuple

from media_scanner.core.common.paths import resolve_within_root
from ..domain.models import MediaTarget
from ..data.mime_types import content_type_for


def resolve_media(root: Path, request_path: str) -> MediaTarget:
    """
    Public Service API: map a request path onto a file inside the scan root.

    Raises:
        PathOutsideRootError: If the path would escape the root.
        FileNotFoundError: If the target is missing or not a regular file.
    """
    path = resolve_within_root(root, request_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {request_path}")

    return MediaTarget(
        path=path,
        content_type=content_type_for(path),
    )


def open_media(target: MediaTarget) -> Tuple[BinaryIO, int]:
    """
    Opens the file before any response bytes are sent, so open errors can
    still become a 500. Returns the handle and the size at open time.
    """
    handle = open(target.path, "rb")
    try:
        size = os.fstat(handle.fileno()).st_size
    except OSError:
        handle.close()
        raise
    return handle, size
