# geocode/grid_systems/__init__.py
"""Geocode variants and the space subdivision encoder."""

from .geocode_variant import Geocode, VariantDefinition
from .exceptions import GeocodeError, OutOfRangeError, DecodeError
from .space_encoder import (
    SpaceEncoder,
    get_encoder,
    encode,
    decode,
    get_epsg_code,
    get_intervals,
    get_cell
)

__all__ = [
    'Geocode',
    'VariantDefinition',
    'GeocodeError',
    'OutOfRangeError',
    'DecodeError',
    'SpaceEncoder',
    'get_encoder',
    'encode',
    'decode',
    'get_epsg_code',
    'get_intervals',
    'get_cell'
]
