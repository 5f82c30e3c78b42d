"""
Variant Pipeline Module

Derives fixed-size re-encoded copies of a source image:
- SizeCatalog: named size → dimensions
- ImageCodec: bytes ⇄ RGBA pixel buffers
- Resizer: bicubic stretch to exact dimensions
- VariantPipeline: per-size decode/resize/encode with failure containment
- VariantPublisher: writes variants to one destination per size
"""

from .image_codec import SUPPORTED_OUTPUT_FORMATS, DecodedImage, ImageCodec
from .resizer import Resizer
from .size_catalog import (
    DEFAULT_SIZE_CATALOG,
    DEFAULT_VARIANT_SIZES,
    EXTRA_SMALL,
    MEDIUM,
    SMALL,
    NamedSize,
    SizeCatalog,
)
from .variant_pipeline import VariantPipeline
from .variant_publisher import VariantPublisher, destination_for

__all__ = [
    # Main pipeline
    "VariantPipeline",
    "VariantPublisher",
    "destination_for",
    # Components
    "ImageCodec",
    "DecodedImage",
    "Resizer",
    "SizeCatalog",
    "NamedSize",
    # Constants
    "DEFAULT_SIZE_CATALOG",
    "DEFAULT_VARIANT_SIZES",
    "SUPPORTED_OUTPUT_FORMATS",
    "EXTRA_SMALL",
    "SMALL",
    "MEDIUM",
]
