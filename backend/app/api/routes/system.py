"""System status: storage directory and disk usage."""

import logging

from fastapi import APIRouter, Depends

from app.exceptions import StorageError
from app.schemas.files import ErrorResponse
from app.schemas.system import StorageStatus
from app.services import get_file_store
from app.services.file_store import FileStore
from app.utils.storage import get_directory_size, get_disk_usage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/storage",
    response_model=StorageStatus,
    responses={500: {"model": ErrorResponse}},
)
def storage_status(store: FileStore = Depends(get_file_store)):
    """How much is stored and how much room the volume has left."""
    directory = store.directory
    try:
        directory.mkdir(parents=True, exist_ok=True)
        count, stored = get_directory_size(directory)
        disk = get_disk_usage(directory)
    except OSError as exc:
        logger.exception("Error reading storage status for %s", directory)
        raise StorageError("Failed to read storage status") from exc

    return StorageStatus(
        files_dir=str(directory),
        file_count=count,
        stored_bytes=stored,
        disk_total_bytes=disk["total_bytes"],
        disk_used_bytes=disk["used_bytes"],
        disk_free_bytes=disk["free_bytes"],
        disk_percent=disk["percent"],
    )
