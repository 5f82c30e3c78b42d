# photo_resizer/enums.py
"""
Enum definitions shared across the photo resizer service.
"""

from enum import Enum
from typing import Optional


class LogLevel(str, Enum):
    """Log level constants for centralized logging system."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogSource(str, Enum):
    """Log source constants for identifying log origins."""

    API = "api"
    WORKER = "worker"
    SYSTEM = "system"
    PIPELINE = "pipeline"
    STORAGE = "storage"


class LogEmoji(str, Enum):
    """Type-safe emoji constants for log messages."""

    INCOMING = "📥"
    OUTGOING = "📤"

    SUCCESS = "✅"
    FAILED = "❌"
    ERROR = "❌"
    WARNING = "⚠️"
    INFO = "ℹ️"
    DEBUG = "🐞"

    PROCESSING = "🔄"
    IMAGE = "🖼️"
    STORAGE = "💾"
    UPLOAD = "⬆️"
    STARTUP = "🚀"
    SHUTDOWN = "🛑"


class LoggerName(str, Enum):
    """Logger name constants for categorizing log entries."""

    API = "api"
    ERROR_HANDLER = "error_handler"
    SYSTEM = "system"
    VARIANT_PIPELINE = "variant_pipeline"
    VARIANT_WORKER = "variant_worker"
    STORAGE = "storage"
    PHOTO_STORAGE = "photo_storage"


class StorageBackendType(str, Enum):
    """Available storage backends."""

    LOCAL = "local"
    MEMORY = "memory"


class ImageFormat(str, Enum):
    """Encoded image formats, named the way Pillow reports them."""

    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    BMP = "BMP"
    TIFF = "TIFF"
    WEBP = "WEBP"
    OTHER = "OTHER"

    @classmethod
    def from_pillow(cls, name: Optional[str]) -> "ImageFormat":
        """Map a Pillow ``Image.format`` value onto this enum."""
        if not name:
            return cls.OTHER
        name = _PILLOW_ALIASES.get(name.upper(), name.upper())
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES.get(self, "application/octet-stream")


# Camera JPEGs carrying multi-picture data open as MPO
_PILLOW_ALIASES = {"MPO": "JPEG"}

_MEDIA_TYPES = {
    ImageFormat.JPEG: "image/jpeg",
    ImageFormat.PNG: "image/png",
    ImageFormat.GIF: "image/gif",
    ImageFormat.BMP: "image/bmp",
    ImageFormat.TIFF: "image/tiff",
    ImageFormat.WEBP: "image/webp",
}
