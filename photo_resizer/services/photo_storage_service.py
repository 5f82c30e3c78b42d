# photo_resizer/services/photo_storage_service.py
"""
Photo Storage Service

Ingestion side of the system: accepts a base64 upload, assigns it a fresh
identifier and stores the original where the variant worker picks it up.
"""

import base64
import binascii
import uuid
from typing import Optional

from ..constants import ORIGINAL_EXTENSION, PHOTOS_CONTAINER
from ..enums import LogEmoji, LoggerName, LogSource
from ..exceptions import (
    BlobNotFoundError,
    InvalidPhotoPayloadError,
    PhotoStorageError,
    StorageError,
)
from ..models.photo_model import PhotoUploadRequest, StoredPhoto
from .logger import get_service_logger
from .storage.base import StorageBackend, validate_blob_key
from .variant_pipeline.size_catalog import SizeCatalog
from .variant_pipeline.variant_publisher import destination_for

logger = get_service_logger(LoggerName.PHOTO_STORAGE, LogSource.API)


def decode_photo_payload(payload: str) -> bytes:
    """
    Strictly decode a base64 photo payload.

    Whitespace anywhere in the payload is ignored; any other character
    outside the base64 alphabet is rejected.

    Raises:
        InvalidPhotoPayloadError: if the payload is empty or not valid base64
    """
    # Line-wrapped (MIME) base64 is accepted; whitespace is not data
    compact = "".join(payload.split()) if payload else ""
    if not compact:
        raise InvalidPhotoPayloadError("Photo payload is empty")

    try:
        data = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidPhotoPayloadError(f"Photo payload is not valid base64: {e}") from e

    if not data:
        raise InvalidPhotoPayloadError("Photo payload decoded to zero bytes")
    return data


class PhotoStorageService:
    """Stores uploaded originals and serves originals and variants back."""

    def __init__(self, storage: StorageBackend, catalog: SizeCatalog):
        self.storage = storage
        self.catalog = catalog

    def store_upload(self, request: PhotoUploadRequest) -> StoredPhoto:
        """
        Persist an upload under a newly generated identifier.

        Raises:
            InvalidPhotoPayloadError: client sent an unusable photo payload
            PhotoStorageError: the original could not be written
        """
        data = decode_photo_payload(request.photo)

        photo_id = str(uuid.uuid4())
        blob_name = f"{photo_id}{ORIGINAL_EXTENSION}"

        try:
            self.storage.ensure_container(PHOTOS_CONTAINER)
            self.storage.write(PHOTOS_CONTAINER, blob_name, data)
        except StorageError as e:
            raise PhotoStorageError(f"Failed to store upload {blob_name}: {e}") from e

        logger.info(
            f"Successfully uploaded {blob_name}",
            extra_context={
                "name": request.name,
                "tags": len(request.tags),
                "bytes": len(data),
            },
            emoji=LogEmoji.UPLOAD,
        )
        return StoredPhoto(
            id=photo_id,
            blob_name=blob_name,
            container=PHOTOS_CONTAINER,
            size_bytes=len(data),
        )

    def read_photo(self, blob_name: str, size_name: Optional[str] = None) -> bytes:
        """
        Return the original, or one of its variants when ``size_name`` is set.

        Raises:
            UnknownSizeError: size_name is not in the catalog
            BlobNotFoundError: nothing is stored under blob_name
            InvalidBlobNameError: blob_name could escape its container
            StorageError: the backend failed
        """
        validate_blob_key(blob_name)
        if size_name is None:
            container = PHOTOS_CONTAINER
        else:
            self.catalog.get(size_name)
            container = destination_for(size_name)

        if not self.storage.exists(container, blob_name):
            raise BlobNotFoundError(container, blob_name)
        return self.storage.read_all(container, blob_name)
