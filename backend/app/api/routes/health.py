"""Liveness and readiness of the file host."""

from fastapi import APIRouter, Depends

from app import __version__
from app.schemas.system import HealthResponse
from app.services import get_file_store
from app.services.file_store import FileStore
from app.utils.storage import is_writable_dir

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(store: FileStore = Depends(get_file_store)):
    """Reports ``degraded`` when uploads could not be written."""
    writable = is_writable_dir(store.directory)
    return HealthResponse(
        status="ok" if writable else "degraded",
        version=__version__,
        storage_writable=writable,
        files_url_prefix=store.url_for(""),
    )


@router.get("/ping")
async def ping():
    return {"status": "ok"}
