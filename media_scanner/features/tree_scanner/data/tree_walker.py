import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from ..domain.interfaces import IMediaClassifier, ITreeWalker
from ..domain.models import FolderEntry, MediaFile, ScanNode
from .ignore_rules import IgnoreRules

logger = logging.getLogger(__name__)


class LocalTreeWalker(ITreeWalker):
    """
    Concrete implementation using os.scandir, one call per directory level.
    Symlinks are never followed, so link cycles cannot recurse forever.
    """

    def __init__(self, classifier: IMediaClassifier, ignore_rules: IgnoreRules):
        self.classifier = classifier
        self.ignore_rules = ignore_rules

    def build_tree(self, root: Path, max_depth: int, errors: List[str]) -> ScanNode:
        return self._scan_at(root, root, 0, max_depth, errors)

    def _scan_at(self, directory: Path, root: Path, depth: int, max_depth: int, errors: List[str]) -> ScanNode:
        node = ScanNode()
        if depth > max_depth:
            return node

        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            self._record(errors, f"Cannot list directory {self._relative(directory, root) or '.'}: {e}")
            return node

        for entry in entries:
            if self.ignore_rules.should_ignore(entry.name):
                continue

            if not self._is_utf8(entry.name):
                # Undecodable bytes come back as lone surrogates; JSON cannot carry them
                self._record(errors, f"Skipping entry with non-UTF-8 name in {self._relative(directory, root) or '.'}: {entry.name!r}")
                continue

            entry_path = Path(entry.path)
            relative_path = self._relative(entry_path, root)

            try:
                if entry.is_dir(follow_symlinks=False):
                    # The folder is listed even when the cutoff leaves it unexpanded
                    sub_node = self._scan_at(entry_path, root, depth + 1, max_depth, errors)
                    node.folders.append(FolderEntry(name=entry.name, path=relative_path, items=sub_node))

                elif entry.is_file(follow_symlinks=False):
                    kind = self.classifier.classify(entry.name)
                    if kind is None:
                        continue

                    stat = entry.stat(follow_symlinks=False)
                    node.files.append(MediaFile(
                        name=entry.name,
                        path=relative_path,
                        kind=kind,
                        size_bytes=stat.st_size,
                        modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                    ))
            except OSError as e:
                # Entry vanished or became unreadable between listing and stat
                self._record(errors, f"Cannot read {relative_path}: {e}")

        return node

    @staticmethod
    def _is_utf8(name: str) -> bool:
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True

    @staticmethod
    def _relative(path: Path, root: Path) -> str:
        relative = path.relative_to(root).as_posix()
        return "" if relative == "." else relative

    @staticmethod
    def _record(errors: List[str], message: str) -> None:
        logger.warning(message)
        errors.append(message)
