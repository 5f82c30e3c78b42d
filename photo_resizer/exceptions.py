# photo_resizer/exceptions.py
"""
Custom exceptions for the photo resizer.

Centralized location for all custom exception classes so the pipeline,
storage layer and routers agree on one error vocabulary.
"""

from typing import Optional


class PhotoResizerError(Exception):
    """Base exception for all photo resizer errors."""

    pass


class DecodeError(PhotoResizerError):
    """Source bytes are not a recognized, complete encoded image."""

    pass


class EncodeError(PhotoResizerError):
    """A pixel buffer could not be encoded in the requested format."""

    pass


class InvalidDimensionsError(PhotoResizerError):
    """Target width or height is not a positive integer."""

    pass


class UnknownSizeError(PhotoResizerError):
    """A size name was requested that is not registered in the catalog."""

    def __init__(self, size_name: str):
        super().__init__(f"Unknown size '{size_name}'")
        self.size_name = size_name


class StorageError(PhotoResizerError):
    """Storage backend operation failed."""

    pass


class InvalidBlobNameError(StorageError):
    """Container or key name is malformed or could escape its container."""

    pass


class BlobNotFoundError(StorageError):
    """Requested blob does not exist in its container."""

    def __init__(self, container: str, key: str):
        super().__init__(f"Blob '{container}/{key}' not found")
        self.container = container
        self.key = key


class PublishError(PhotoResizerError):
    """A variant could not be written to its destination."""

    def __init__(self, destination: str, identifier: str, reason: Optional[str] = None):
        message = f"Failed to publish '{identifier}' to '{destination}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.destination = destination
        self.identifier = identifier


class InvalidPhotoPayloadError(PhotoResizerError):
    """Uploaded photo payload is missing, empty or not valid base64."""

    pass


class PhotoStorageError(PhotoResizerError):
    """The uploaded original could not be persisted."""

    pass


class ConfigurationError(PhotoResizerError):
    """Custom exception for configuration and validation errors."""

    pass
