"""Business logic services: FastAPI dependency providers."""

from __future__ import annotations

from app.config import settings
from app.services.file_store import FileStore


def get_file_store() -> FileStore:
    """File store bound to the configured storage directory.

    Built per request from the current settings; the store holds no state
    beyond the directory itself.
    """
    return FileStore(settings.files_dir, settings.files_url_prefix)
