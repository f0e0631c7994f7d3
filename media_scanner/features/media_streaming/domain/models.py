from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MediaTarget:
    """
    A validated file inside the scan root, ready to be streamed.
    The size is taken from the open handle, see open_media().
    """
    path: Path
    content_type: str
