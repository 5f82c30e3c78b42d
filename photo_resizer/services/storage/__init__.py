"""
Blob Storage Collaborators

Container/key blob stores used for originals and variants:
- StorageBackend: abstract interface
- LocalStorageBackend: one directory per container on the local filesystem
- InMemoryStorageBackend: process-local dict, used by tests and ephemeral runs
"""

from .base import StorageBackend, validate_blob_key, validate_container_name
from .local_storage import LocalStorageBackend
from .memory_storage import InMemoryStorageBackend

__all__ = [
    "StorageBackend",
    "LocalStorageBackend",
    "InMemoryStorageBackend",
    "validate_container_name",
    "validate_blob_key",
]
