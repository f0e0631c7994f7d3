import logging
from pathlib import Path
from typing import FrozenSet, Optional

from media_scanner.core.config.settings import DEFAULT_IGNORED_DIRS, DEFAULT_MAX_DEPTH

from ..domain.interfaces import IMediaClassifier
from ..domain.models import ScanRequest, ScanResult
from ..data.classifier import ExtensionClassifier
from ..data.ignore_rules import IgnoreRules
from ..data.tree_walker import LocalTreeWalker

logger = logging.getLogger(__name__)


class TreeScanner:
    """
    Service responsible for turning a scan root into a media tree.
    Every call builds a fresh tree; nothing is cached between requests.
    """

    def __init__(self, classifier: Optional[IMediaClassifier] = None):
        self.classifier = classifier or ExtensionClassifier()

    def scan(self, request: ScanRequest) -> ScanResult:
        logger.info(f"Scanning directory: {request.root_path} (max depth {request.max_depth})")

        walker = LocalTreeWalker(self.classifier, IgnoreRules(request.ignored_names))
        errors = []
        tree = walker.build_tree(request.root_path, request.max_depth, errors)
        result = ScanResult(root_path=request.root_path, tree=tree, errors=errors)

        files, folders = result.count()
        logger.info(f"Scan complete. Files: {files}, folders: {folders}, errors: {len(result.errors)}")
        return result


def scan_directory(root_path: Path, max_depth: int = DEFAULT_MAX_DEPTH,
                   ignored_names: FrozenSet[str] = DEFAULT_IGNORED_DIRS) -> ScanResult:
    """
    Public Service API: scan a directory tree for media files.

    Args:
        root_path: Absolute path of the scan root.
        max_depth: Number of directory levels below the root that are expanded.
        ignored_names: Entry names skipped at every level, besides hidden ones.
    """
    request = ScanRequest(root_path=root_path, max_depth=max_depth, ignored_names=ignored_names)
    return TreeScanner().scan(request)
