# photo_resizer/services/storage/memory_storage.py
"""
In-memory storage backend.
"""

import threading
from typing import Dict, List

from ...exceptions import BlobNotFoundError, StorageError
from .base import StorageBackend, validate_blob_key, validate_container_name


class InMemoryStorageBackend(StorageBackend):
    """Keeps blobs in a dict of containers; contents are lost on exit."""

    def __init__(self):
        self._containers: Dict[str, Dict[str, bytes]] = {}
        self._lock = threading.Lock()

    def ensure_container(self, name: str) -> None:
        validate_container_name(name)
        with self._lock:
            self._containers.setdefault(name, {})

    def read_all(self, container: str, key: str) -> bytes:
        validate_blob_key(key)
        with self._lock:
            blobs = self._containers.get(validate_container_name(container), {})
            if key not in blobs:
                raise BlobNotFoundError(container, key)
            return blobs[key]

    def write(self, container: str, key: str, data: bytes) -> None:
        validate_blob_key(key)
        with self._lock:
            blobs = self._containers.get(validate_container_name(container))
            if blobs is None:
                raise StorageError(f"Container '{container}' does not exist")
            blobs[key] = bytes(data)

    def exists(self, container: str, key: str) -> bool:
        validate_blob_key(key)
        with self._lock:
            return key in self._containers.get(validate_container_name(container), {})

    def container_names(self) -> List[str]:
        with self._lock:
            return sorted(self._containers)

    def keys(self, container: str) -> List[str]:
        with self._lock:
            return sorted(self._containers.get(container, {}))
