"""Tests for storage utilities."""

import pytest

from app.utils.storage import (
    get_directory_size,
    get_disk_usage,
    is_safe_filename,
    is_writable_dir,
)


@pytest.mark.parametrize("name", ["report.pdf", "app-config.json", "my file (1).zip", ".well-known"])
def test_safe_names(name):
    assert is_safe_filename(name) is True


@pytest.mark.parametrize("name", ["", ".", "..", "../x", "a/b", "a\\b", "nul\x00"])
def test_unsafe_names(name):
    assert is_safe_filename(name) is False


def test_directory_size(tmp_path):
    (tmp_path / "a").write_bytes(b"abc")
    (tmp_path / "b").write_bytes(b"de")
    assert get_directory_size(tmp_path) == (2, 5)


def test_disk_usage(tmp_path):
    usage = get_disk_usage(tmp_path)
    assert usage["total_bytes"] >= usage["used_bytes"]
    assert 0 <= usage["percent"] <= 100


def test_directory_size_counts_only_files(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a").write_bytes(b"abc")
    assert get_directory_size(tmp_path) == (1, 3)


def test_writable_dir_existing(tmp_path):
    assert is_writable_dir(tmp_path) is True


def test_writable_dir_not_yet_created(tmp_path):
    assert is_writable_dir(tmp_path / "public" / "files") is True


def test_writable_dir_blocked_by_file(tmp_path):
    blocker = tmp_path / "files"
    blocker.write_bytes(b"")
    assert is_writable_dir(blocker) is False
    assert is_writable_dir(blocker / "nested") is False
