# photo_resizer/utils/router_helpers.py
"""
Router Helper Functions

Decorator mapping service exceptions onto HTTP responses so every endpoint
reports client errors and storage errors with distinct status codes.
"""

from functools import wraps
from typing import Callable, Tuple, Type

from fastapi import HTTPException, status

from ..enums import LoggerName, LogSource
from ..exceptions import (
    BlobNotFoundError,
    InvalidBlobNameError,
    InvalidPhotoPayloadError,
    PhotoStorageError,
    StorageError,
    UnknownSizeError,
)
from ..services.logger import get_service_logger

logger = get_service_logger(LoggerName.ERROR_HANDLER, LogSource.API)

# Order matters: subclasses before their bases
EXCEPTION_STATUS_MAP: Tuple[Tuple[Type[Exception], int], ...] = (
    (InvalidPhotoPayloadError, status.HTTP_400_BAD_REQUEST),
    (UnknownSizeError, status.HTTP_400_BAD_REQUEST),
    (InvalidBlobNameError, status.HTTP_400_BAD_REQUEST),
    (BlobNotFoundError, status.HTTP_404_NOT_FOUND),
    (PhotoStorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def handle_exceptions(operation_name: str):
    """
    Decorator for standardized exception handling in router endpoints.

    Args:
        operation_name: Human-readable description of the operation for error messages

    Usage:
        @handle_exceptions("upload photo")
        async def upload_photo():
            ...
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                for exc_type, status_code in EXCEPTION_STATUS_MAP:
                    if isinstance(e, exc_type):
                        if status_code >= 500:
                            logger.error(f"Error {operation_name}", exception=e)
                        else:
                            logger.warning(
                                f"Rejected request to {operation_name}",
                                extra_context={"error": str(e)},
                            )
                        detail = (
                            str(e)
                            if status_code < 500
                            else f"Failed to {operation_name}: storage unavailable"
                        )
                        raise HTTPException(status_code=status_code, detail=detail) from e

                logger.error(f"Unexpected error {operation_name}", exception=e)
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Failed to {operation_name}",
                ) from e

        return wrapper

    return decorator
