#!/usr/bin/env python3
"""
Unit tests for ImageCodec.

Tests decoding, format detection and deterministic re-encoding.
"""

import io

import pytest
from PIL import Image

from photo_resizer.enums import ImageFormat
from photo_resizer.exceptions import DecodeError, EncodeError
from photo_resizer.services.variant_pipeline.image_codec import (
    SUPPORTED_OUTPUT_FORMATS,
    DecodedImage,
    ImageCodec,
)
from photo_resizer.services.variant_pipeline.resizer import Resizer
from photo_resizer.services.variant_pipeline.size_catalog import DEFAULT_SIZE_CATALOG


@pytest.mark.unit
@pytest.mark.pipeline
class TestImageCodec:
    """Test suite for the Pillow-backed codec."""

    @pytest.fixture
    def codec(self):
        return ImageCodec()

    # ============================================================================
    # DECODE TESTS
    # ============================================================================

    def test_decode_jpeg(self, codec, jpeg_bytes):
        decoded, fmt = codec.decode(jpeg_bytes)

        assert fmt is ImageFormat.JPEG
        assert decoded.size == (1024, 768)
        assert decoded.mode == "RGBA"

    def test_decode_png_from_stream(self, codec, png_bytes):
        decoded, fmt = codec.decode(io.BytesIO(png_bytes))

        assert fmt is ImageFormat.PNG
        assert decoded.size == (1024, 768)

    def test_decode_empty_bytes_raises(self, codec):
        with pytest.raises(DecodeError):
            codec.decode(b"")

    def test_decode_garbage_raises(self, codec):
        with pytest.raises(DecodeError):
            codec.decode(b"definitely not an image")

    def test_decode_truncated_jpeg_raises(self, codec, jpeg_bytes):
        with pytest.raises(DecodeError):
            codec.decode(jpeg_bytes[: len(jpeg_bytes) // 2])

    def test_decode_unsupported_output_format_reports_other(self, codec):
        buffer = io.BytesIO()
        Image.new("RGB", (8, 8)).save(buffer, "PPM")

        decoded, fmt = codec.decode(buffer.getvalue())

        assert fmt is ImageFormat.OTHER
        assert decoded.size == (8, 8)

    # ============================================================================
    # FORMAT DETECTION TESTS
    # ============================================================================

    def test_detect_format(self, codec, jpeg_bytes, png_bytes):
        assert codec.detect_format(jpeg_bytes) is ImageFormat.JPEG
        assert codec.detect_format(png_bytes) is ImageFormat.PNG

    def test_detect_format_unrecognized_returns_none(self, codec):
        assert codec.detect_format(b"") is None
        assert codec.detect_format(b"\x00\x01\x02") is None

    # ============================================================================
    # ENCODE TESTS
    # ============================================================================

    def test_encode_other_format_raises(self, codec):
        image = DecodedImage(Image.new("RGBA", (4, 4)))

        with pytest.raises(EncodeError):
            codec.encode(image, ImageFormat.OTHER)

    def test_encode_is_deterministic(self, codec, jpeg_bytes):
        decoded, fmt = codec.decode(jpeg_bytes)

        assert codec.encode(decoded, fmt) == codec.encode(decoded, fmt)

    def test_jpeg_quality_is_clamped(self):
        assert ImageCodec(jpeg_quality=0).jpeg_quality == 1
        assert ImageCodec(jpeg_quality=100).jpeg_quality == 95
        assert ImageCodec(jpeg_quality=70).jpeg_quality == 70

    @pytest.mark.parametrize(
        "image_format",
        sorted(SUPPORTED_OUTPUT_FORMATS, key=lambda f: f.value),
        ids=lambda f: f.value,
    )
    def test_resized_variants_decode_at_catalog_dimensions(
        self, codec, make_image, image_format
    ):
        source = make_image(image_format.value, (1024, 768))
        resizer = Resizer()

        for size in DEFAULT_SIZE_CATALOG:
            decoded, fmt = codec.decode(source)
            assert fmt is image_format

            encoded = codec.encode(resizer.resize(decoded, size.width, size.height), fmt)
            reopened, reopened_fmt = codec.decode(encoded)

            assert reopened.size == (size.width, size.height)
            assert reopened_fmt is image_format


@pytest.mark.unit
class TestImageFormat:
    """Pillow format name mapping."""

    def test_known_names(self):
        assert ImageFormat.from_pillow("JPEG") is ImageFormat.JPEG
        assert ImageFormat.from_pillow("png") is ImageFormat.PNG

    def test_mpo_is_treated_as_jpeg(self):
        assert ImageFormat.from_pillow("MPO") is ImageFormat.JPEG

    def test_unknown_and_missing_names(self):
        assert ImageFormat.from_pillow("PPM") is ImageFormat.OTHER
        assert ImageFormat.from_pillow(None) is ImageFormat.OTHER

    def test_media_types(self):
        assert ImageFormat.JPEG.media_type == "image/jpeg"
        assert ImageFormat.OTHER.media_type == "application/octet-stream"
