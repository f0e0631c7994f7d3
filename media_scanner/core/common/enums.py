# File: media_scanner/core/common/enums.py

from enum import Enum, unique

@unique
class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
