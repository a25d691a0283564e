"""
Name: Document Storage Adapter Tests

Responsibilities:
  - Validate LocalFileStorage path resolution and error mapping
  - Validate the in-memory adapter used by use case tests
"""

import pytest
from prd_extractor.domain.services import DocumentStoragePort
from prd_extractor.infrastructure.storage import (
    InMemoryDocumentStorage,
    LocalFileStorage,
    StorageConfigurationError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def storage(tmp_path):
    (tmp_path / "uploads").mkdir()
    (tmp_path / "uploads" / "prd.txt").write_bytes(b"Phase 1\nbody")
    return LocalFileStorage(tmp_path)


def test_local_storage_implements_storage_port():
    assert DocumentStoragePort in LocalFileStorage.__mro__


def test_download_reads_relative_path(storage):
    assert storage.download("uploads/prd.txt") == b"Phase 1\nbody"


def test_download_ignores_leading_slash(storage):
    assert storage.download("/uploads/prd.txt") == b"Phase 1\nbody"


def test_download_missing_file_raises_not_found(storage):
    with pytest.raises(StorageNotFoundError) as exc:
        storage.download("uploads/missing.pdf")

    assert exc.value.path == "uploads/missing.pdf"
    assert isinstance(exc.value, StorageError)


def test_download_directory_raises_not_found(storage):
    with pytest.raises(StorageNotFoundError):
        storage.download("uploads")


def test_download_empty_path_raises_not_found(storage):
    with pytest.raises(StorageNotFoundError):
        storage.download("")


def test_download_rejects_paths_outside_root(storage):
    with pytest.raises(StoragePermissionError):
        storage.download("../secret.txt")


def test_exists(storage):
    assert storage.exists("uploads/prd.txt") is True
    assert storage.exists("uploads/other.txt") is False
    assert storage.exists("../outside.txt") is False
    assert storage.exists("") is False


def test_root_must_be_a_directory(tmp_path):
    with pytest.raises(StorageConfigurationError):
        LocalFileStorage(tmp_path / "does-not-exist")


def test_in_memory_storage_roundtrip():
    storage = InMemoryDocumentStorage({"a.txt": b"one"})
    storage.put("b.txt", b"two")

    assert storage.download("a.txt") == b"one"
    assert storage.download("b.txt") == b"two"
    assert storage.exists("b.txt")


def test_in_memory_storage_missing_raises_not_found():
    with pytest.raises(StorageNotFoundError):
        InMemoryDocumentStorage().download("nothing.pdf")
