# photo_resizer/models/photo_model.py
"""
Upload request/response models.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PhotoUploadRequest(BaseModel):
    """JSON body accepted by the upload endpoint."""

    name: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    photo: str = Field(..., description="Base64-encoded image bytes")


class PhotoUploadResponse(BaseModel):
    """Identifier assigned to a stored upload."""

    id: str
    blob_name: str

    model_config = ConfigDict(from_attributes=True)


class StoredPhoto(BaseModel):
    """Where an uploaded original was written"""

    id: str
    blob_name: str
    container: str
    size_bytes: int
