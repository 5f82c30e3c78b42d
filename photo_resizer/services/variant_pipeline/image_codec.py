# photo_resizer/services/variant_pipeline/image_codec.py
"""
Image Codec Component

Decodes encoded image bytes into RGBA pixel buffers and re-encodes buffers
in the format the source was detected as.
"""

import io
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from ...constants import DEFAULT_JPEG_QUALITY, MAX_JPEG_QUALITY, MIN_JPEG_QUALITY
from ...enums import ImageFormat
from ...exceptions import DecodeError, EncodeError

PIXEL_MODE = "RGBA"

# Formats that can be written back out; anything else fails at encode time
SUPPORTED_OUTPUT_FORMATS = frozenset(
    {
        ImageFormat.JPEG,
        ImageFormat.PNG,
        ImageFormat.GIF,
        ImageFormat.BMP,
        ImageFormat.TIFF,
        ImageFormat.WEBP,
    }
)

ImageSource = Union[bytes, bytearray, memoryview, BinaryIO]


@dataclass
class DecodedImage:
    """In-memory 4-channel, 8-bit-per-channel pixel buffer."""

    image: Image.Image

    def __post_init__(self):
        if self.image.mode != PIXEL_MODE:
            raise ValueError(
                f"DecodedImage requires {PIXEL_MODE} pixels, got {self.image.mode}"
            )

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    @property
    def mode(self) -> str:
        return self.image.mode


def _as_stream(source: ImageSource) -> BinaryIO:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    return source


class ImageCodec:
    """
    Pillow-backed decoder/encoder.

    Encoding is deterministic: identical buffers and format always produce
    identical bytes.
    """

    def __init__(self, jpeg_quality: int = DEFAULT_JPEG_QUALITY):
        self.jpeg_quality = max(MIN_JPEG_QUALITY, min(MAX_JPEG_QUALITY, jpeg_quality))

    def decode(self, source: ImageSource) -> Tuple[DecodedImage, ImageFormat]:
        """
        Decode an encoded image into an RGBA buffer.

        Args:
            source: Encoded bytes or a readable binary stream positioned at
                the start of the image

        Returns:
            (decoded image, detected format)

        Raises:
            DecodeError: if the data is empty, unrecognized, corrupt or truncated
        """
        stream = _as_stream(source)
        try:
            with Image.open(stream) as img:
                detected = ImageFormat.from_pillow(img.format)
                # Force the full decode so truncated data fails here, not later
                img.load()
                rgba = img.convert(PIXEL_MODE)
        except UnidentifiedImageError as e:
            raise DecodeError("Unrecognized image data") from e
        except Image.DecompressionBombError as e:
            raise DecodeError(f"Image too large to decode: {e}") from e
        except (OSError, EOFError, ValueError, SyntaxError) as e:
            raise DecodeError(f"Corrupt or truncated image data: {e}") from e

        return DecodedImage(rgba), detected

    def detect_format(self, source: ImageSource) -> Optional[ImageFormat]:
        """Sniff the format from the header only; None if unrecognized."""
        stream = _as_stream(source)
        try:
            with Image.open(stream) as img:
                return ImageFormat.from_pillow(img.format)
        except (UnidentifiedImageError, OSError, ValueError, SyntaxError):
            return None

    def encode(self, image: DecodedImage, fmt: ImageFormat) -> bytes:
        """
        Encode a pixel buffer in the given format.

        Raises:
            EncodeError: if the format is not supported for output or the
                encoder fails
        """
        if fmt not in SUPPORTED_OUTPUT_FORMATS:
            raise EncodeError(f"Unsupported output format '{fmt.value}'")

        buffer = io.BytesIO()
        try:
            if fmt is ImageFormat.JPEG:
                # JPEG has no alpha channel
                image.image.convert("RGB").save(
                    buffer, fmt.value, quality=self.jpeg_quality, optimize=True
                )
            elif fmt is ImageFormat.WEBP:
                image.image.save(buffer, fmt.value, lossless=True)
            else:
                image.image.save(buffer, fmt.value)
        except (OSError, ValueError, KeyError) as e:
            raise EncodeError(f"Failed to encode {fmt.value}: {e}") from e

        return buffer.getvalue()
