from pathlib import PurePath
from typing import Optional

from media_scanner.core.common.enums import MediaKind
from ..domain.interfaces import IMediaClassifier

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".svg", ".webp"})
VIDEO_EXTENSIONS = frozenset({".mp4", ".mov", ".avi", ".mkv", ".webm"})
AUDIO_EXTENSIONS = frozenset({".mp3", ".wav", ".ogg", ".flac", ".m4a"})


class ExtensionClassifier(IMediaClassifier):
    """
    Maps the text after the last dot of a filename (case-insensitive)
    to a media kind.
    """

    def classify(self, filename: str) -> Optional[MediaKind]:
        ext = PurePath(filename).suffix.lower()

        if ext in IMAGE_EXTENSIONS:
            return MediaKind.IMAGE
        if ext in VIDEO_EXTENSIONS:
            return MediaKind.VIDEO
        if ext in AUDIO_EXTENSIONS:
            return MediaKind.AUDIO
        return None


_default = ExtensionClassifier()


def classify(filename: str) -> Optional[MediaKind]:
    return _default.classify(filename)
