"""Flat-directory file store backing the list and upload endpoints."""

from __future__ import annotations

import logging
import os
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO

from app.exceptions import ClientError, StorageError
from app.schemas.files import FileRecord, StoredFile
from app.utils.storage import is_safe_filename

logger = logging.getLogger(__name__)

_COPY_CHUNK = 1024 * 1024


class FileStore:
    """Lists and writes files in a single flat directory.

    The directory is created on demand by both operations. Writes go straight
    to the final path with no locking and no temp file, so concurrent uploads
    of the same name are last-writer-wins and an interrupted write can leave
    a truncated file behind.
    """

    def __init__(self, directory: str | Path, url_prefix: str = "/files/"):
        self._directory = Path(directory)
        self._url_prefix = url_prefix

    @property
    def directory(self) -> Path:
        return self._directory

    def url_for(self, name: str) -> str:
        return f"{self._url_prefix}{name}"

    def list(self) -> list[FileRecord]:
        """Describe every entry in the directory, sorted by name."""
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            records = []
            with os.scandir(self._directory) as entries:
                for entry in entries:
                    st = entry.stat()
                    records.append(
                        FileRecord(
                            name=entry.name,
                            size=st.st_size,
                            modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
                            url=self.url_for(entry.name),
                        )
                    )
        except OSError as exc:
            logger.exception("Error reading files from %s", self._directory)
            raise StorageError("Failed to read files") from exc

        records.sort(key=lambda r: r.name)
        logger.debug("Listed %d files in %s", len(records), self._directory)
        return records

    def store(self, name: str | None, source: BinaryIO) -> StoredFile:
        """Write ``source`` to ``<directory>/<name>``, replacing any existing file."""
        if not name or not is_safe_filename(name):
            logger.warning("Rejected upload with unsafe file name %r", name)
            raise ClientError("Invalid file name")

        target = self._directory / name
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with target.open("wb") as dst:
                shutil.copyfileobj(source, dst, _COPY_CHUNK)
                size = dst.tell()
        except OSError as exc:
            logger.exception("Error uploading file %s", target)
            raise StorageError("Failed to upload file") from exc

        logger.info("Stored %s (%d bytes)", name, size)
        return StoredFile(name=name, size=size, url=self.url_for(name))
