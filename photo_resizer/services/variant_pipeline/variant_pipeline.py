# photo_resizer/services/variant_pipeline/variant_pipeline.py
"""
Variant Pipeline

Produces one decode → resize → encode cycle per requested size for a single
source image. Per-size failures are recorded and never stop the other sizes.
The pipeline does not publish; see VariantPublisher.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import BinaryIO, Callable, List, Optional, Sequence, Union

from ...constants import MAX_VARIANT_WORKERS
from ...enums import LogEmoji, LoggerName, LogSource
from ...exceptions import DecodeError, PhotoResizerError
from ...models.variant_model import (
    SourceImage,
    VariantBatch,
    VariantError,
    VariantResult,
)
from ..logger import get_service_logger
from .image_codec import ImageCodec
from .resizer import Resizer
from .size_catalog import DEFAULT_SIZE_CATALOG, SizeCatalog

logger = get_service_logger(LoggerName.VARIANT_PIPELINE, LogSource.PIPELINE)

RawSource = Union[bytes, bytearray, memoryview, BinaryIO]
SourceInput = Union[RawSource, Callable[[], RawSource]]


class VariantPipeline:
    """
    Orchestrates variant generation for one source image at a time.

    The source is read exactly once into an immutable buffer; every size then
    decodes from its own fresh cursor over that buffer, because decoding
    consumes the stream it reads from.
    """

    def __init__(
        self,
        catalog: Optional[SizeCatalog] = None,
        codec: Optional[ImageCodec] = None,
        resizer: Optional[Resizer] = None,
        max_workers: int = 1,
    ):
        """
        Initialize variant pipeline.

        Args:
            catalog: Size catalog used for dimension lookup
            codec: Decoder/encoder (default JPEG quality when omitted)
            resizer: Resizer implementation
            max_workers: Size chains run concurrently when greater than 1
        """
        self.catalog = catalog if catalog is not None else DEFAULT_SIZE_CATALOG
        self.codec = codec or ImageCodec()
        self.resizer = resizer or Resizer()
        self.max_workers = max(1, min(max_workers, MAX_VARIANT_WORKERS))

    def capture_source(self, source: SourceInput, identifier: str) -> SourceImage:
        """
        Read the whole source into an immutable SourceImage.

        Raises:
            DecodeError: if the source cannot be read
        """
        try:
            if callable(source) and not hasattr(source, "read"):
                source = source()

            if isinstance(source, (bytes, bytearray, memoryview)):
                data = bytes(source)
            else:
                if hasattr(source, "seekable") and source.seekable():
                    source.seek(0)
                data = source.read()
        except (OSError, PhotoResizerError) as e:
            raise DecodeError(f"Failed to read source '{identifier}': {e}") from e

        return SourceImage(
            identifier=identifier,
            data=data,
            detected_format=self.codec.detect_format(data),
        )

    def produce_variants(
        self,
        source: SourceInput,
        identifier: str,
        size_names: Sequence[str],
    ) -> VariantBatch:
        """
        Generate one encoded variant per requested size.

        Args:
            source: Encoded bytes, a readable binary stream, or a zero-argument
                callable returning either
            identifier: Stable identifier of the source image
            size_names: Catalog size names, in the order results should appear

        Returns:
            VariantBatch with results in input order and one VariantError per
            failed size
        """
        start_time = time.monotonic()
        batch = VariantBatch(identifier=identifier)

        try:
            source_image = self.capture_source(source, identifier)
        except DecodeError as e:
            logger.warning(
                f"Could not read source {identifier}",
                extra_context={"error": str(e)},
            )
            batch.errors = [VariantError(size_name, e) for size_name in size_names]
            return batch

        if self.max_workers > 1 and len(size_names) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                outcomes = list(
                    executor.map(
                        lambda name: self._produce_contained(source_image, name),
                        size_names,
                    )
                )
        else:
            outcomes = [
                self._produce_contained(source_image, name) for name in size_names
            ]

        for outcome in outcomes:
            if isinstance(outcome, VariantResult):
                batch.results.append(outcome)
            else:
                batch.errors.append(outcome)

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.debug(
            f"Produced {len(batch.results)}/{len(size_names)} variants for {identifier}",
            extra_context={
                "format": (
                    source_image.detected_format.value
                    if source_image.detected_format
                    else None
                ),
                "source_bytes": source_image.size_bytes,
                "processing_time_ms": elapsed_ms,
            },
            emoji=LogEmoji.IMAGE,
        )
        return batch

    def _produce_contained(
        self, source_image: SourceImage, size_name: str
    ) -> Union[VariantResult, VariantError]:
        try:
            return self.produce_variant(source_image, size_name)
        except PhotoResizerError as e:
            logger.warning(
                f"Variant '{size_name}' failed for {source_image.identifier}",
                extra_context={"error_type": type(e).__name__, "error": str(e)},
            )
            return VariantError(size_name=size_name, error=e)

    def produce_variant(self, source_image: SourceImage, size_name: str) -> VariantResult:
        """
        Run one decode → resize → encode chain.

        Raises:
            DecodeError, UnknownSizeError, InvalidDimensionsError, EncodeError
        """
        decoded, fmt = self.codec.decode(source_image.open_stream())
        width, height = self.catalog.lookup(size_name)
        resized = self.resizer.resize(decoded, width, height)
        encoded = self.codec.encode(resized, fmt)

        return VariantResult(
            size_name=size_name,
            encoded_bytes=encoded,
            format=fmt,
            width=resized.width,
            height=resized.height,
        )
