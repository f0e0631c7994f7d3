# File: media_scanner/core/common/paths.py

from pathlib import Path


class PathOutsideRootError(ValueError):
    """Raised when a client-supplied path would escape the scan root."""


def resolve_within_root(root: Path, relative_path: str) -> Path:
    """
    Joins a client-supplied relative path onto the scan root and normalises it.

    Raises:
        PathOutsideRootError: If the normalised result is not the root itself
            or located beneath it (`..` segments, absolute paths, symlinks
            pointing elsewhere).
    """
    base = root.resolve()
    try:
        candidate = (base / relative_path.lstrip("/\\")).resolve()
    except (OSError, ValueError) as e:
        raise PathOutsideRootError(f"Invalid path {relative_path!r}: {e}") from e

    if candidate != base and base not in candidate.parents:
        raise PathOutsideRootError(f"Path escapes scan root: {relative_path!r}")
    return candidate
