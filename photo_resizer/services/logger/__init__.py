"""
Centralized Logger Service Module.

A thin, type-safe layer over loguru so every service logs with the same
logger name, source and emoji conventions.

Usage:
    from photo_resizer.services.logger import get_service_logger
    from photo_resizer.enums import LoggerName, LogSource

    logger = get_service_logger(LoggerName.VARIANT_PIPELINE, LogSource.PIPELINE)
    logger.info("Generated variant", extra_context={"size": "small"})
"""

# Re-export commonly used enums for convenience
from ...enums import LogEmoji, LoggerName, LogLevel, LogSource
from .logger_service import ServiceLogger, configure_logging, get_service_logger

__all__ = [
    "ServiceLogger",
    "configure_logging",
    "get_service_logger",
    # Enums
    "LogLevel",
    "LogSource",
    "LoggerName",
    "LogEmoji",
]
