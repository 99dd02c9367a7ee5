"""File API routes: list and upload against the storage directory."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from app.exceptions import ClientError
from app.schemas.files import ErrorResponse, FileListResponse, UploadResponse
from app.services import get_file_store
from app.services.file_store import FileStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "",
    response_model=FileListResponse,
    responses={500: {"model": ErrorResponse}},
)
def list_files(store: FileStore = Depends(get_file_store)):
    """Every file in the storage directory, sorted by name."""
    return FileListResponse(files=store.list())


@router.post(
    "",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def upload_file(
    file: UploadFile | None = File(None),
    store: FileStore = Depends(get_file_store),
):
    """Store one multipart file, overwriting any file of the same name."""
    if file is None:
        logger.info("Upload request without a file field")
        raise ClientError("No file provided")
    stored = store.store(file.filename, file.file)
    return UploadResponse(file=stored)
