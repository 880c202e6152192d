"""
Spatial encoding package.

Encodes planar coordinates into geohash and quad-tile codes by
bit-interleaved subdivision of a variant's bounding rectangle.
"""

__version__ = "1.0.0"
__description__ = "Geohash and quad-tile spatial encoding"

from .abstractions.types import CellBounds, GeocodeCell
from .grid_systems import (
    Geocode,
    SpaceEncoder,
    GeocodeError,
    OutOfRangeError,
    DecodeError,
    get_encoder,
    encode,
    decode,
    get_epsg_code,
    get_intervals,
    get_cell
)

__all__ = [
    '__version__',
    '__description__',
    'CellBounds',
    'GeocodeCell',
    'Geocode',
    'SpaceEncoder',
    'GeocodeError',
    'OutOfRangeError',
    'DecodeError',
    'get_encoder',
    'encode',
    'decode',
    'get_epsg_code',
    'get_intervals',
    'get_cell',
]
