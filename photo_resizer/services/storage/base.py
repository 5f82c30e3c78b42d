# photo_resizer/services/storage/base.py
"""
Storage backend interface.

Writes overwrite whatever is stored under the same (container, key) and
``ensure_container`` is idempotent; the variant publisher relies on both.
"""

import re
from abc import ABC, abstractmethod

from ...constants import CONTAINER_NAME_PATTERN
from ...exceptions import InvalidBlobNameError

_CONTAINER_NAME_RE = re.compile(CONTAINER_NAME_PATTERN)


def validate_container_name(name: str) -> str:
    """Reject container names outside lowercase letters, digits and hyphens."""
    if not name or not _CONTAINER_NAME_RE.match(name) or "--" in name:
        raise InvalidBlobNameError(f"Invalid container name '{name}'")
    return name


def validate_blob_key(key: str) -> str:
    """Reject keys that could escape their container."""
    if not key or key in (".", "..") or "/" in key or "\\" in key or "\x00" in key:
        raise InvalidBlobNameError(f"Invalid blob key '{key}'")
    return key


class StorageBackend(ABC):
    """Container/key blob store."""

    @abstractmethod
    def ensure_container(self, name: str) -> None:
        """Create the container if it does not exist yet."""

    @abstractmethod
    def read_all(self, container: str, key: str) -> bytes:
        """
        Return the full contents of a blob.

        Raises:
            BlobNotFoundError: if the blob does not exist
            StorageError: on any other failure
        """

    @abstractmethod
    def write(self, container: str, key: str, data: bytes) -> None:
        """
        Store ``data`` under ``key``, replacing any existing blob.

        Raises:
            StorageError: if the container is missing or the write fails
        """

    @abstractmethod
    def exists(self, container: str, key: str) -> bool:
        """Return True if the blob exists."""
