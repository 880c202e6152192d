"""Geocode variant catalog."""

from dataclasses import dataclass
from enum import Enum
from typing import List

from ..abstractions.types import CellBounds

GEOHASH_BOUNDS = CellBounds(-180.0, 180.0, -90.0, 90.0)
QUADTILE_BOUNDS = CellBounds(-20037508.342789248, 20037508.342789248,
                             -20037508.342789248, 20037508.342789248)

GEOHASH32_CHARS = '0123456789bcdefghjkmnpqrstuvwxyz'
GEOHASH16_CHARS = '0123456789abcdef'
# Index is the 2-bit (x, y) quadrant, so ordering is not lexicographic
QUADTILE_CHARS = '2031'


@dataclass(frozen=True)
class VariantDefinition:
    """Structured variant definition."""
    name: str
    bounds: CellBounds
    alphabet: str
    bits_per_symbol: int
    epsg_code: int

    def __post_init__(self):
        if len(self.alphabet) != 2 ** self.bits_per_symbol:
            raise ValueError(
                f"Alphabet for {self.name} must hold {2 ** self.bits_per_symbol} "
                f"characters, got: {len(self.alphabet)}"
            )
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError(f"Alphabet for {self.name} has duplicate characters")
        if not (self.bounds.min_x < self.bounds.max_x and
                self.bounds.min_y < self.bounds.max_y):
            raise ValueError(f"Bounds for {self.name} are empty: {self.bounds}")

    @property
    def crs(self) -> str:
        return f"EPSG:{self.epsg_code}"


class Geocode(Enum):
    """Supported geocode variants."""

    GEOHASH = VariantDefinition('geohash', GEOHASH_BOUNDS, GEOHASH32_CHARS, 5, 4326)
    GEOHASH16 = VariantDefinition('geohash16', GEOHASH_BOUNDS, GEOHASH16_CHARS, 4, 4326)
    QUADTILE = VariantDefinition('quadtile', QUADTILE_BOUNDS, QUADTILE_CHARS, 2, 3857)

    @property
    def definition(self) -> VariantDefinition:
        return self.value

    @property
    def bounds(self) -> CellBounds:
        return self.value.bounds

    @property
    def alphabet(self) -> str:
        return self.value.alphabet

    @property
    def bits_per_symbol(self) -> int:
        return self.value.bits_per_symbol

    @property
    def epsg_code(self) -> int:
        return self.value.epsg_code

    @property
    def crs(self) -> str:
        return self.value.crs

    @classmethod
    def from_name(cls, name: str) -> 'Geocode':
        """
        Get variant by name.

        Args:
            name: Variant name, case-insensitive (e.g. 'geohash', 'QuadTile')

        Returns:
            Geocode member
        """
        key = name.strip().lower()
        for member in cls:
            if member.value.name == key:
                return member

        raise ValueError(f"Unknown geocode variant: {name}. Available: {cls.list_available()}")

    @classmethod
    def list_available(cls) -> List[str]:
        """List all variant names."""
        return [member.value.name for member in cls]
