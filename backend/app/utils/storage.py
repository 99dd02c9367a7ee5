"""Disk space and filename utilities for the storage directory."""

import os
from pathlib import Path

import psutil

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def is_safe_filename(name: str) -> bool:
    """True if ``name`` stays inside the directory it is joined onto."""
    if name in ("", ".", ".."):
        return False
    return not any(ch in name for ch in _FORBIDDEN_CHARS)


def get_disk_usage(path: str | Path) -> dict:
    """Get disk usage of the volume holding the given path."""
    usage = psutil.disk_usage(str(path))
    return {
        "total_bytes": usage.total,
        "used_bytes": usage.used,
        "free_bytes": usage.free,
        "percent": usage.percent,
    }


def get_directory_size(path: str | Path) -> tuple[int, int]:
    """Count regular files and sum their sizes in a flat directory."""
    count = 0
    total = 0
    for f in Path(path).iterdir():
        if f.is_file():
            count += 1
            total += f.stat().st_size
    return count, total


def is_writable_dir(path: str | Path) -> bool:
    """True if ``path`` is a writable directory, or could be created as one."""
    path = Path(path)
    if path.exists():
        return path.is_dir() and os.access(path, os.W_OK)
    parent = path.parent
    while not parent.exists() and parent != parent.parent:
        parent = parent.parent
    return parent.is_dir() and os.access(parent, os.W_OK)
