"""Health and storage status schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
    service: str = "ultest"
    storage_writable: bool
    files_url_prefix: str


class StorageStatus(BaseModel):
    """Storage directory contents and the volume it lives on."""
    files_dir: str
    file_count: int
    stored_bytes: int
    disk_total_bytes: int
    disk_used_bytes: int
    disk_free_bytes: int
    disk_percent: float
