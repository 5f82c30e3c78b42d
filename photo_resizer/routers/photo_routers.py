# photo_resizer/routers/photo_routers.py
"""
Photo HTTP endpoints.

Role: Upload ingestion and photo/variant retrieval
Responsibilities: Accept base64 uploads, hand new originals to the variant
worker, serve stored originals and variants
"""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Query, Response

from ..config import settings
from ..dependencies import PhotoStorageServiceDep, VariantWorkerDep
from ..enums import LogEmoji, LoggerName, LogSource
from ..models.photo_model import PhotoUploadRequest, PhotoUploadResponse
from ..services.logger import get_service_logger
from ..services.variant_pipeline import ImageCodec
from ..utils.router_helpers import handle_exceptions

logger = get_service_logger(LoggerName.API, LogSource.API)

router = APIRouter(tags=["photos"])

_codec = ImageCodec()


@router.post("/photos", response_model=PhotoUploadResponse)
@handle_exceptions("upload photo")
async def upload_photo(
    request: PhotoUploadRequest,
    background_tasks: BackgroundTasks,
    photo_storage_service: PhotoStorageServiceDep,
    variant_worker: VariantWorkerDep,
):
    """
    Store a base64-encoded photo under a new identifier.

    Variants are generated after the response is sent when
    ``auto_generate_variants`` is enabled.
    """
    stored = photo_storage_service.store_upload(request)

    if settings.auto_generate_variants:
        background_tasks.add_task(variant_worker.handle_new_photo, stored.blob_name)
        logger.debug(
            f"Queued variant generation for {stored.blob_name}",
            emoji=LogEmoji.PROCESSING,
        )

    return PhotoUploadResponse(id=stored.id, blob_name=stored.blob_name)


@router.get("/photos/{blob_name}")
@handle_exceptions("fetch photo")
async def get_photo(
    blob_name: str,
    photo_storage_service: PhotoStorageServiceDep,
    size: Optional[str] = Query(
        None, description="Catalog size name; omit for the original"
    ),
):
    """Return the stored original, or one of its variants."""
    data = photo_storage_service.read_photo(blob_name, size)
    fmt = _codec.detect_format(data)
    media_type = fmt.media_type if fmt else "application/octet-stream"
    return Response(content=data, media_type=media_type)
