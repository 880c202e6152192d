# geocode/abstractions/types/geocode_types.py
"""Geocode cell type definitions."""

from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple
from shapely.geometry import Polygon, Point, box


@dataclass(frozen=True)
class CellBounds:
    """Axis-aligned rectangle in variant CRS units."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Tuple[float, float]:
        """Get rectangle center as (x, y)."""
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds in shapely order (minx, miny, maxx, maxy)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def polygon(self) -> Polygon:
        """Get bounds as polygon."""
        return box(*self.bounds)

    def contains(self, x: float, y: float) -> bool:
        """Check if point is within bounds (edges included)."""
        return (self.min_x <= x <= self.max_x and
                self.min_y <= y <= self.max_y)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Get bounds as (min_x, max_x, min_y, max_y)."""
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    def __str__(self) -> str:
        return f"({self.min_x} - {self.max_x}, {self.min_y} - {self.max_y})"


@dataclass
class GeocodeCell:
    """Region addressed by a single geocode."""
    code: str
    variant: str
    bounds: CellBounds
    geometry: Polygon
    centroid: Point
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def from_bounds(cls, code: str, variant: str, bounds: CellBounds,
                    metadata: Optional[Dict[str, Any]] = None) -> 'GeocodeCell':
        """Build a cell with geometry derived from its bounds."""
        return cls(
            code=code,
            variant=variant,
            bounds=bounds,
            geometry=bounds.polygon,
            centroid=Point(*bounds.center),
            metadata=metadata
        )

    @property
    def precision(self) -> int:
        return len(self.code)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            'code': self.code,
            'variant': self.variant,
            'geometry_wkt': self.geometry.wkt,
            'centroid_wkt': self.centroid.wkt,
            'bounds': self.bounds.as_tuple(),
            'metadata': self.metadata or {}
        }
