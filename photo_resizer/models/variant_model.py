# photo_resizer/models/variant_model.py
"""
Data carried through the variant pipeline.

These are plain dataclasses rather than pydantic models because they hold
raw byte buffers that never cross the HTTP boundary.
"""

import io
from dataclasses import dataclass, field
from typing import List, Optional

from ..enums import ImageFormat
from ..exceptions import PhotoResizerError


@dataclass(frozen=True)
class SourceImage:
    """Encoded source bytes captured once per pipeline invocation."""

    identifier: str
    data: bytes
    detected_format: Optional[ImageFormat] = None

    def open_stream(self) -> io.BytesIO:
        """Return a new read cursor positioned at the first byte."""
        return io.BytesIO(self.data)

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class VariantResult:
    """One re-encoded copy of a source image at a named size."""

    size_name: str
    encoded_bytes: bytes
    format: ImageFormat
    width: int
    height: int

    @property
    def size_bytes(self) -> int:
        return len(self.encoded_bytes)


@dataclass(frozen=True)
class VariantError:
    """Failure recorded for one requested size."""

    size_name: str
    error: PhotoResizerError

    @property
    def message(self) -> str:
        return str(self.error)

    @property
    def error_type(self) -> str:
        return type(self.error).__name__


@dataclass
class VariantBatch:
    """Everything produced for one source image, successes and failures."""

    identifier: str
    results: List[VariantResult] = field(default_factory=list)
    errors: List[VariantError] = field(default_factory=list)

    @property
    def succeeded(self) -> List[str]:
        return [result.size_name for result in self.results]

    @property
    def failed(self) -> List[str]:
        return [error.size_name for error in self.errors]

    @property
    def is_complete(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class PublishOutcome:
    """Result of writing one variant to its destination."""

    size_name: str
    destination: str
    identifier: str
    success: bool
    bytes_written: int = 0
    error: Optional[PhotoResizerError] = None


@dataclass
class VariantWorkReport:
    """Summary of one trigger invocation."""

    identifier: str
    batch: VariantBatch
    outcomes: List[PublishOutcome] = field(default_factory=list)
    processing_time_ms: int = 0

    @property
    def published(self) -> List[str]:
        return [outcome.destination for outcome in self.outcomes if outcome.success]

    @property
    def publish_failures(self) -> List[PublishOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]
