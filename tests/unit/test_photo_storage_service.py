#!/usr/bin/env python3
"""
Unit tests for PhotoStorageService (upload ingestion).
"""

import base64
import uuid
from unittest.mock import MagicMock

import pytest

from photo_resizer.exceptions import (
    BlobNotFoundError,
    InvalidBlobNameError,
    InvalidPhotoPayloadError,
    PhotoStorageError,
    StorageError,
    UnknownSizeError,
)
from photo_resizer.models.photo_model import PhotoUploadRequest
from photo_resizer.services.photo_storage_service import (
    PhotoStorageService,
    decode_photo_payload,
)
from photo_resizer.services.storage.base import StorageBackend
from photo_resizer.services.variant_pipeline import DEFAULT_SIZE_CATALOG


@pytest.mark.unit
class TestPhotoStorageService:
    """Test suite for storing uploaded originals."""

    @pytest.fixture
    def service(self, memory_storage):
        return PhotoStorageService(memory_storage, DEFAULT_SIZE_CATALOG)

    def _request(self, payload: str) -> PhotoUploadRequest:
        return PhotoUploadRequest(
            name="beach", description="sunset", tags=["holiday"], photo=payload
        )

    def test_store_upload_writes_original(self, service, memory_storage, jpeg_bytes):
        stored = service.store_upload(
            self._request(base64.b64encode(jpeg_bytes).decode("ascii"))
        )

        assert uuid.UUID(stored.id)
        assert stored.blob_name == f"{stored.id}.jpg"
        assert stored.container == "photos"
        assert stored.size_bytes == len(jpeg_bytes)
        assert memory_storage.read_all("photos", stored.blob_name) == jpeg_bytes

    def test_each_upload_gets_a_new_identifier(self, service):
        payload = base64.b64encode(b"bytes").decode("ascii")

        first = service.store_upload(self._request(payload))
        second = service.store_upload(self._request(payload))

        assert first.id != second.id

    @pytest.mark.parametrize("payload", ["", "   ", "not base64!!", "abc"])
    def test_invalid_payload_is_client_error(self, service, memory_storage, payload):
        with pytest.raises(InvalidPhotoPayloadError):
            service.store_upload(self._request(payload))

        assert memory_storage.keys("photos") == []

    def test_storage_failure_is_distinct(self):
        storage = MagicMock(spec=StorageBackend)
        storage.write.side_effect = StorageError("unreachable")
        service = PhotoStorageService(storage, DEFAULT_SIZE_CATALOG)

        with pytest.raises(PhotoStorageError):
            service.store_upload(self._request(base64.b64encode(b"x").decode("ascii")))

    def test_read_photo_original_and_variant(self, service, memory_storage):
        memory_storage.ensure_container("photos")
        memory_storage.ensure_container("photos-small")
        memory_storage.write("photos", "a.jpg", b"original")
        memory_storage.write("photos-small", "a.jpg", b"small")

        assert service.read_photo("a.jpg") == b"original"
        assert service.read_photo("a.jpg", "small") == b"small"

    def test_read_photo_missing_variant(self, service):
        with pytest.raises(BlobNotFoundError):
            service.read_photo("a.jpg", "medium")

    def test_read_photo_unknown_size(self, service):
        with pytest.raises(UnknownSizeError):
            service.read_photo("a.jpg", "huge")


@pytest.mark.unit
class TestDecodePhotoPayload:
    """Strict base64 handling."""

    def test_round_trip(self):
        assert decode_photo_payload(base64.b64encode(b"\x00\xff").decode()) == b"\x00\xff"

    def test_surrounding_whitespace_is_ignored(self):
        assert decode_photo_payload("  aGk=\n") == b"hi"

    def test_rejects_non_alphabet_characters(self):
        with pytest.raises(InvalidPhotoPayloadError):
            decode_photo_payload("aGk=$")

    def test_line_wrapped_base64_is_accepted(self, jpeg_bytes):
        wrapped = base64.encodebytes(jpeg_bytes).decode("ascii")

        assert "\n" in wrapped.strip()
        assert decode_photo_payload(wrapped) == jpeg_bytes


@pytest.mark.unit
class TestReadPhotoNames:
    """Malformed blob names are client errors, not storage outages."""

    @pytest.mark.parametrize("blob_name", ["a\\b", "..", "a/b"])
    def test_malformed_blob_name(self, memory_storage, blob_name):
        service = PhotoStorageService(memory_storage, DEFAULT_SIZE_CATALOG)

        with pytest.raises(InvalidBlobNameError):
            service.read_photo(blob_name)
