# photo_resizer/routers/health_routers.py
"""
Health check endpoint.
"""

from fastapi import APIRouter

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Simple readiness probe listing the sizes generated for each upload."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "sizes": settings.variant_size_list,
    }
