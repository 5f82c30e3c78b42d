# photo_resizer/services/storage/local_storage.py
"""
Filesystem storage backend.

Each container is a directory under the configured root and each blob a
file inside it.
"""

import os
import tempfile
from pathlib import Path
from typing import Union

from ...enums import LogEmoji, LoggerName, LogSource
from ...exceptions import BlobNotFoundError, StorageError
from ..logger import get_service_logger
from .base import StorageBackend, validate_blob_key, validate_container_name

logger = get_service_logger(LoggerName.STORAGE, LogSource.STORAGE)


class LocalStorageBackend(StorageBackend):
    """Stores blobs as files under ``root/<container>/<key>``."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def _container_path(self, container: str) -> Path:
        return self.root / validate_container_name(container)

    def _blob_path(self, container: str, key: str) -> Path:
        return self._container_path(container) / validate_blob_key(key)

    def ensure_container(self, name: str) -> None:
        path = self._container_path(name)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create container '{name}': {e}") from e

    def read_all(self, container: str, key: str) -> bytes:
        path = self._blob_path(container, key)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise BlobNotFoundError(container, key) from e
        except OSError as e:
            raise StorageError(f"Failed to read '{container}/{key}': {e}") from e

    def write(self, container: str, key: str, data: bytes) -> None:
        path = self._blob_path(container, key)
        if not path.parent.is_dir():
            raise StorageError(f"Container '{container}' does not exist")

        # Write to a sibling temp file then swap it in so readers never see a partial blob
        try:
            fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(data)
                os.replace(temp_name, path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write '{container}/{key}': {e}") from e

        logger.debug(
            f"Wrote blob {container}/{key}",
            extra_context={"bytes": len(data)},
            emoji=LogEmoji.STORAGE,
        )

    def exists(self, container: str, key: str) -> bool:
        return self._blob_path(container, key).is_file()
