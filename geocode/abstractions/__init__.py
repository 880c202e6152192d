"""Foundation layer - pure types with no geocode dependencies."""

from .types import CellBounds, GeocodeCell

__all__ = [
    'CellBounds',
    'GeocodeCell',
]
