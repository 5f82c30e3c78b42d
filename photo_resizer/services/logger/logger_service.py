# photo_resizer/services/logger/logger_service.py
"""
Logger service built on loguru.

Every record carries ``logger_name`` and ``source`` extras so sinks can
format and filter on them. Services never call ``loguru.logger`` directly;
they obtain a ServiceLogger through ``get_service_logger``.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger

from ...constants import LOG_FILE_RETENTION, LOG_FILE_ROTATION, LOG_FORMAT
from ...enums import LogEmoji, LoggerName, LogLevel, LogSource

# Records emitted before configure_logging() still need the extras the format uses
logger.configure(
    extra={"logger_name": LoggerName.SYSTEM.value, "source": LogSource.SYSTEM.value}
)


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.INFO,
    log_file: Optional[str] = None,
    colorize: Optional[bool] = None,
) -> None:
    """
    Install the console sink and, optionally, a rotating file sink.

    Args:
        level: Minimum level for every sink
        log_file: Path of a log file to write in addition to stderr
        colorize: Force ANSI colors on/off (default: auto-detect tty)
    """
    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()

    logger.remove()
    logger.add(sys.stderr, level=level_name, format=LOG_FORMAT, colorize=colorize)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level_name,
            format=LOG_FORMAT,
            rotation=LOG_FILE_ROTATION,
            retention=LOG_FILE_RETENTION,
            enqueue=True,
            colorize=False,
        )


class ServiceLogger:
    """
    Logger pre-bound to one logger name and source.

    Emoji priority system (highest to lowest):
    1. Direct: Emoji passed directly to the log method call
    2. Instance-set: Default emoji set when creating the service logger
    3. Fallback: Default emoji based on log level
    """

    def __init__(
        self,
        logger_name: LoggerName,
        source: LogSource = LogSource.SYSTEM,
        default_emoji: Optional[LogEmoji] = None,
    ):
        self.logger_name = logger_name
        self.source = source
        self.default_emoji = default_emoji
        self._logger = logger.bind(logger_name=logger_name.value, source=source.value)

    def _resolve_emoji(
        self, method_emoji: Optional[LogEmoji], fallback_emoji: LogEmoji
    ) -> LogEmoji:
        if method_emoji is not None:
            return method_emoji
        if self.default_emoji is not None:
            return self.default_emoji
        return fallback_emoji

    def _emit(
        self,
        level: LogLevel,
        message: str,
        emoji: LogEmoji,
        context: Optional[Dict[str, Any]] = None,
        exception: Optional[BaseException] = None,
    ) -> None:
        text = f"{emoji.value} {message}"
        if context:
            details = ", ".join(f"{key}={value}" for key, value in context.items())
            text = f"{text} [{details}]"
        bound = self._logger.bind(**(context or {}))
        if exception is not None:
            bound = bound.opt(exception=exception)
        # Message is pre-formatted; keep loguru from treating braces as fields
        bound.log(level.value, "{}", text)

    def error(
        self,
        message: str,
        exception: Optional[BaseException] = None,
        error_context: Optional[Dict[str, Any]] = None,
        emoji: Optional[LogEmoji] = None,
    ) -> None:
        """Log an error with emoji priority system."""
        self._emit(
            LogLevel.ERROR,
            message,
            self._resolve_emoji(emoji, LogEmoji.ERROR),
            error_context,
            exception,
        )

    def warning(
        self,
        message: str,
        extra_context: Optional[Dict[str, Any]] = None,
        emoji: Optional[LogEmoji] = None,
    ) -> None:
        """Log a warning with emoji priority system."""
        self._emit(
            LogLevel.WARNING,
            message,
            self._resolve_emoji(emoji, LogEmoji.WARNING),
            extra_context,
        )

    def info(
        self,
        message: str,
        extra_context: Optional[Dict[str, Any]] = None,
        emoji: Optional[LogEmoji] = None,
    ) -> None:
        """Log an info message with emoji priority system."""
        self._emit(
            LogLevel.INFO,
            message,
            self._resolve_emoji(emoji, LogEmoji.INFO),
            extra_context,
        )

    def debug(
        self,
        message: str,
        extra_context: Optional[Dict[str, Any]] = None,
        emoji: Optional[LogEmoji] = None,
    ) -> None:
        """Log a debug message with emoji priority system."""
        self._emit(
            LogLevel.DEBUG,
            message,
            self._resolve_emoji(emoji, LogEmoji.DEBUG),
            extra_context,
        )


def get_service_logger(
    logger_name: LoggerName,
    source: LogSource = LogSource.SYSTEM,
    default_emoji: Optional[LogEmoji] = None,
) -> ServiceLogger:
    """
    Factory function to create a pre-configured logger for a specific service.

    Args:
        logger_name: The logger name enum to use for all calls
        source: The log source enum to use for all calls (defaults to SYSTEM)
        default_emoji: Instance-level default emoji that overrides level-based fallbacks

    Returns:
        ServiceLogger instance with error, warning, info, debug methods

    Example:
        logger = get_service_logger(LoggerName.VARIANT_WORKER, LogSource.WORKER)
        logger.error("Something went wrong", exception=exc)
    """
    return ServiceLogger(logger_name, source, default_emoji)
