# photo_resizer/dependencies.py
"""
FastAPI dependency providers.

Services are process-wide singletons built lazily from settings so tests can
swap them through ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from .config import settings
from .enums import StorageBackendType
from .services.photo_storage_service import PhotoStorageService
from .services.storage import InMemoryStorageBackend, LocalStorageBackend
from .services.storage.base import StorageBackend
from .services.variant_pipeline import (
    DEFAULT_SIZE_CATALOG,
    ImageCodec,
    VariantPipeline,
    VariantPublisher,
)
from .workers.variant_worker import VariantWorker


@lru_cache(maxsize=1)
def get_storage_backend() -> StorageBackend:
    """Get the configured storage backend singleton."""
    if settings.storage_backend == StorageBackendType.MEMORY:
        return InMemoryStorageBackend()
    settings.ensure_directories()
    return LocalStorageBackend(settings.blobs_directory)


def get_photo_storage_service(
    storage: Annotated[StorageBackend, Depends(get_storage_backend)],
) -> PhotoStorageService:
    return PhotoStorageService(storage, DEFAULT_SIZE_CATALOG)


@lru_cache(maxsize=1)
def get_variant_worker() -> VariantWorker:
    """Get the VariantWorker singleton wired from settings."""
    storage = get_storage_backend()
    pipeline = VariantPipeline(
        catalog=DEFAULT_SIZE_CATALOG,
        codec=ImageCodec(jpeg_quality=settings.jpeg_quality),
        max_workers=settings.variant_max_workers,
    )
    return VariantWorker(
        storage=storage,
        pipeline=pipeline,
        publisher=VariantPublisher(storage),
        size_names=settings.variant_size_list,
    )


PhotoStorageServiceDep = Annotated[
    PhotoStorageService, Depends(get_photo_storage_service)
]
VariantWorkerDep = Annotated[VariantWorker, Depends(get_variant_worker)]
