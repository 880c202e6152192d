# geocode/abstractions/types/__init__.py
"""Type definitions for the abstractions layer."""

# Geocode types
from .geocode_types import CellBounds, GeocodeCell

__all__ = [
    'CellBounds',
    'GeocodeCell',
]
