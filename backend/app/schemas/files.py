"""File schemas: listing records and upload results."""

from datetime import datetime

from pydantic import BaseModel


class FileRecord(BaseModel):
    """Stored file as derived from filesystem attributes at list time."""
    name: str
    size: int
    modified: datetime
    url: str


class StoredFile(BaseModel):
    """Result of a single upload."""
    name: str
    size: int
    url: str


class FileListResponse(BaseModel):
    success: bool = True
    files: list[FileRecord]


class UploadResponse(BaseModel):
    success: bool = True
    file: StoredFile


class ErrorResponse(BaseModel):
    """Failure envelope shared by every file endpoint."""
    success: bool = False
    error: str
