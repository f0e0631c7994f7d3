from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from media_scanner.core.common.enums import MediaKind
from .models import ScanNode


class IMediaClassifier(ABC):
    """
    Contract for deciding which media kind a filename belongs to.
    """
    @abstractmethod
    def classify(self, filename: str) -> Optional[MediaKind]:
        """Returns the media kind for the filename, or None if it is not media."""
        pass


class ITreeWalker(ABC):
    """
    Contract for building a ScanNode tree from a filesystem directory.
    """
    @abstractmethod
    def build_tree(self, root: Path, max_depth: int, errors: List[str]) -> ScanNode:
        """
        Walks `root` down to `max_depth` levels and returns the classified tree.
        Must not raise for unreadable directories or entries; failures are
        appended to `errors` and the affected subtree is left empty.
        """
        pass
