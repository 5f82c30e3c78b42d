from .photo_model import PhotoUploadRequest, PhotoUploadResponse, StoredPhoto
from .variant_model import (
    PublishOutcome,
    SourceImage,
    VariantBatch,
    VariantError,
    VariantResult,
    VariantWorkReport,
)

__all__ = [
    "PhotoUploadRequest",
    "PhotoUploadResponse",
    "StoredPhoto",
    "SourceImage",
    "VariantResult",
    "VariantError",
    "VariantBatch",
    "PublishOutcome",
    "VariantWorkReport",
]
