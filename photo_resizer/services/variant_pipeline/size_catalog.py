# photo_resizer/services/variant_pipeline/size_catalog.py
"""
Named size catalog.

A read-only mapping from size name to target pixel dimensions. The catalog
is compiled in; ``validate()`` runs once at process start.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Tuple

from ...exceptions import InvalidDimensionsError, UnknownSizeError


@dataclass(frozen=True)
class NamedSize:
    """A catalog entry binding a label to fixed pixel dimensions."""

    name: str
    width: int
    height: int

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)


class SizeCatalog:
    """Immutable name → NamedSize lookup table."""

    def __init__(self, sizes: Iterable[NamedSize]):
        entries = {}
        for size in sizes:
            if size.name in entries:
                raise ValueError(f"Duplicate size name '{size.name}'")
            entries[size.name] = size
        self._entries: Mapping[str, NamedSize] = MappingProxyType(entries)

    def lookup(self, name: str) -> Tuple[int, int]:
        """
        Return (width, height) for a size name.

        Raises:
            UnknownSizeError: if the name is not registered
        """
        return self.get(name).dimensions

    def get(self, name: str) -> NamedSize:
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownSizeError(name) from None

    @property
    def names(self) -> List[str]:
        return list(self._entries)

    def validate(self) -> None:
        """Raise InvalidDimensionsError if any entry has a non-positive dimension."""
        for size in self._entries.values():
            if (
                not isinstance(size.width, int)
                or not isinstance(size.height, int)
                or size.width <= 0
                or size.height <= 0
            ):
                raise InvalidDimensionsError(
                    f"Size '{size.name}' has invalid dimensions "
                    f"{size.width}x{size.height}"
                )

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[NamedSize]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


EXTRA_SMALL = "extra-small"
SMALL = "small"
MEDIUM = "medium"

DEFAULT_SIZE_CATALOG = SizeCatalog(
    [
        NamedSize(EXTRA_SMALL, 320, 200),
        NamedSize(SMALL, 640, 400),
        NamedSize(MEDIUM, 800, 600),
    ]
)

# extra-small stays dormant unless selected through settings
DEFAULT_VARIANT_SIZES = (SMALL, MEDIUM)
