# photo_resizer/constants.py
"""
Service-wide constants.
"""

# Containers
PHOTOS_CONTAINER = "photos"
VARIANT_CONTAINER_PREFIX = "photos-"

# Originals are always stored under "<uuid><ORIGINAL_EXTENSION>"
ORIGINAL_EXTENSION = ".jpg"

# Image encoding (1-95)
DEFAULT_JPEG_QUALITY = 90
MIN_JPEG_QUALITY = 1
MAX_JPEG_QUALITY = 95

# Variant generation
DEFAULT_VARIANT_MAX_WORKERS = 1
MAX_VARIANT_WORKERS = 8

# Storage naming rules
CONTAINER_NAME_PATTERN = r"^[a-z0-9](?:[a-z0-9-]{1,61}[a-z0-9])$"

# Logging
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[source]}</cyan>:<cyan>{extra[logger_name]}</cyan> - "
    "<level>{message}</level>"
)
LOG_FILE_ROTATION = "10 MB"
LOG_FILE_RETENTION = "14 days"
DEFAULT_LOG_FILENAME = "photo_resizer.log"
