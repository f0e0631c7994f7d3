# File: media_scanner/api/schemas.py

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from media_scanner.core.common.enums import MediaKind
from media_scanner.features.tree_scanner.domain.models import FolderEntry, MediaFile, ScanNode, ScanResult


class MediaFileSchema(BaseModel):
    name: str
    path: str
    type: MediaKind
    size: int = Field(ge=0)
    modified: datetime

    @classmethod
    def from_domain(cls, media: MediaFile) -> "MediaFileSchema":
        return cls(
            name=media.name,
            path=media.path,
            type=media.kind,
            size=media.size_bytes,
            modified=media.modified_at,
        )


class ScanNodeSchema(BaseModel):
    files: List[MediaFileSchema] = []
    folders: List["FolderEntrySchema"] = []

    @classmethod
    def from_domain(cls, node: ScanNode) -> "ScanNodeSchema":
        return cls(
            files=[MediaFileSchema.from_domain(f) for f in node.files],
            folders=[FolderEntrySchema.from_domain(f) for f in node.folders],
        )


class FolderEntrySchema(BaseModel):
    name: str
    path: str
    items: ScanNodeSchema

    @classmethod
    def from_domain(cls, folder: FolderEntry) -> "FolderEntrySchema":
        return cls(name=folder.name, path=folder.path, items=ScanNodeSchema.from_domain(folder.items))


ScanNodeSchema.model_rebuild()


class ScanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base_dir: str = Field(alias="baseDir")
    data: ScanNodeSchema

    @classmethod
    def from_result(cls, result: ScanResult) -> "ScanResponse":
        return cls(base_dir=str(result.root_path), data=ScanNodeSchema.from_domain(result.tree))


class ConfigResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    port: int
    scan_path: str = Field(alias="scanPath")


class OpenPathRequest(BaseModel):
    path: str


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
