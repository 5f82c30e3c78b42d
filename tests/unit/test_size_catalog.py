#!/usr/bin/env python3
"""
Unit tests for SizeCatalog.
"""

import pytest

from photo_resizer.exceptions import InvalidDimensionsError, UnknownSizeError
from photo_resizer.services.variant_pipeline.size_catalog import (
    DEFAULT_SIZE_CATALOG,
    DEFAULT_VARIANT_SIZES,
    NamedSize,
    SizeCatalog,
)


@pytest.mark.unit
class TestSizeCatalog:
    """Test suite for the named size catalog."""

    def test_default_entries(self):
        assert DEFAULT_SIZE_CATALOG.lookup("small") == (640, 400)
        assert DEFAULT_SIZE_CATALOG.lookup("medium") == (800, 600)
        assert DEFAULT_SIZE_CATALOG.lookup("extra-small") == (320, 200)

    def test_extra_small_not_in_default_publish_list(self):
        assert DEFAULT_VARIANT_SIZES == ("small", "medium")
        assert "extra-small" in DEFAULT_SIZE_CATALOG

    def test_lookup_unknown_size_raises(self):
        with pytest.raises(UnknownSizeError) as exc_info:
            DEFAULT_SIZE_CATALOG.lookup("nonexistent")

        assert exc_info.value.size_name == "nonexistent"

    def test_get_returns_named_size(self):
        size = DEFAULT_SIZE_CATALOG.get("small")

        assert size == NamedSize("small", 640, 400)
        assert size.dimensions == (640, 400)

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_SIZE_CATALOG._entries["huge"] = NamedSize("huge", 1, 1)

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            SizeCatalog([NamedSize("a", 1, 1), NamedSize("a", 2, 2)])

    def test_validate_accepts_default_catalog(self):
        DEFAULT_SIZE_CATALOG.validate()

    @pytest.mark.parametrize("width,height", [(0, 100), (100, -1)])
    def test_validate_rejects_non_positive_dimensions(self, width, height):
        catalog = SizeCatalog([NamedSize("ok", 10, 10), NamedSize("bad", width, height)])

        with pytest.raises(InvalidDimensionsError):
            catalog.validate()

    def test_names_keep_registration_order(self):
        assert DEFAULT_SIZE_CATALOG.names == ["extra-small", "small", "medium"]
        assert len(DEFAULT_SIZE_CATALOG) == 3
