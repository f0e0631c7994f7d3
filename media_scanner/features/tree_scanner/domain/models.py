from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import FrozenSet, List, Tuple

from media_scanner.core.common.enums import MediaKind
from media_scanner.core.config.settings import DEFAULT_IGNORED_DIRS, DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to scan a directory tree.
    """
    root_path: Path
    max_depth: int = DEFAULT_MAX_DEPTH
    ignored_names: FrozenSet[str] = DEFAULT_IGNORED_DIRS

    def __post_init__(self):
        if not self.root_path.is_absolute():
            raise ValueError(f"Scan root must be absolute: {self.root_path}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth cannot be negative: {self.max_depth}")


@dataclass(frozen=True)
class MediaFile:
    """
    A classified media file found directly inside a scanned directory.
    `path` is slash-separated and relative to the scan root.
    """
    name: str
    path: str
    kind: MediaKind
    size_bytes: int
    modified_at: datetime


@dataclass
class ScanNode:
    """One directory level: its media files and its subfolders."""
    files: List[MediaFile] = field(default_factory=list)
    folders: List["FolderEntry"] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.files and not self.folders


@dataclass
class FolderEntry:
    name: str
    path: str
    items: ScanNode = field(default_factory=ScanNode)


@dataclass
class ScanResult:
    """
    Report returned after scanning completes.
    Errors are recorded per unreadable directory or entry, never raised.
    """
    root_path: Path
    tree: ScanNode
    errors: List[str] = field(default_factory=list)

    def count(self) -> Tuple[int, int]:
        """Total (files, folders) across the whole tree."""
        files, folders = 0, 0
        stack = [self.tree]
        while stack:
            node = stack.pop()
            files += len(node.files)
            folders += len(node.folders)
            stack.extend(folder.items for folder in node.folders)
        return files, folders
