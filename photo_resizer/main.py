# photo_resizer/main.py
"""
FastAPI application entry point for the photo resizer.

Variant generation runs as a background task after each upload; the worker
itself lives in photo_resizer.workers.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .config import settings, validate_variant_configuration
from .enums import LogEmoji, LoggerName, LogSource
from .routers import health_routers as health
from .routers import photo_routers as photos
from .services.logger import configure_logging, get_service_logger

logger = get_service_logger(LoggerName.SYSTEM, LogSource.SYSTEM)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle application startup and shutdown"""
    settings.ensure_directories()
    configure_logging(settings.log_level, settings.log_file_path)

    # Fail fast on a broken catalog rather than on the first upload
    validate_variant_configuration(size_names=settings.variant_size_list)

    logger.info(
        "Starting photo resizer API",
        extra_context={
            "environment": settings.environment,
            "storage_backend": settings.storage_backend.value,
            "variant_sizes": settings.variant_size_list,
        },
        emoji=LogEmoji.STARTUP,
    )
    yield
    logger.info("Shutting down photo resizer API", emoji=LogEmoji.SHUTDOWN)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Photo Resizer API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url=None,
    )
    app.include_router(photos.router, prefix="/api")
    app.include_router(health.router, prefix="/api")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
