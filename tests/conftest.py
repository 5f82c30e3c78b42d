# tests/conftest.py
"""
Pytest configuration and shared fixtures for the photo resizer tests.
"""

import io
from typing import Callable, Tuple

import pytest
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from photo_resizer.config import settings
from photo_resizer.dependencies import get_storage_backend, get_variant_worker
from photo_resizer.main import app
from photo_resizer.services.storage import InMemoryStorageBackend
from photo_resizer.services.variant_pipeline import VariantPipeline, VariantPublisher
from photo_resizer.workers.variant_worker import VariantWorker


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: isolated component tests")
    config.addinivalue_line(
        "markers", "integration: tests spanning worker, storage and API"
    )
    config.addinivalue_line("markers", "pipeline: variant pipeline tests")
    config.addinivalue_line("markers", "storage: storage backend tests")


def render_image(
    image_format: str = "JPEG", size: Tuple[int, int] = (1024, 768)
) -> bytes:
    """Render a simple two-tone test image and return its encoded bytes."""
    mode = "RGB" if image_format == "JPEG" else "RGBA"
    img = Image.new(mode, size, color="green")
    draw = ImageDraw.Draw(img)
    draw.rectangle(
        [size[0] // 5, size[1] // 5, size[0] * 4 // 5, size[1] * 4 // 5],
        fill="yellow",
    )
    buffer = io.BytesIO()
    img.save(buffer, image_format)
    return buffer.getvalue()


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Factory fixture producing encoded test images."""
    return render_image


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A valid 1024x768 JPEG."""
    return render_image("JPEG", (1024, 768))


@pytest.fixture
def png_bytes() -> bytes:
    """A valid 1024x768 RGBA PNG."""
    return render_image("PNG", (1024, 768))


@pytest.fixture
def memory_storage() -> InMemoryStorageBackend:
    return InMemoryStorageBackend()


@pytest.fixture
def variant_worker(memory_storage) -> VariantWorker:
    return VariantWorker(
        storage=memory_storage,
        pipeline=VariantPipeline(),
        publisher=VariantPublisher(memory_storage),
    )


@pytest.fixture
def api_client(memory_storage, variant_worker):
    """TestClient wired to in-memory storage."""
    app.dependency_overrides[get_storage_backend] = lambda: memory_storage
    app.dependency_overrides[get_variant_worker] = lambda: variant_worker
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auto_generate(monkeypatch):
    """Toggle background variant generation for one test."""

    def _set(enabled: bool) -> None:
        monkeypatch.setattr(settings, "auto_generate_variants", enabled)

    return _set
