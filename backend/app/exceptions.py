"""Errors raised by the file store and rendered as failure envelopes."""

from __future__ import annotations


class FileStoreError(Exception):
    """Base error carrying the HTTP status and the client-facing message."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientError(FileStoreError):
    """Missing or unusable input from the caller."""

    status_code = 400


class StorageError(FileStoreError):
    """Filesystem failure. The message is generic; the cause is only logged."""

    status_code = 500
