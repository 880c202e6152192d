# geocode/grid_systems/space_encoder.py
"""Bit-interleaved space subdivision encoder for geocode variants."""

from typing import Dict, Iterable, List, Optional, Tuple, Union
import math
import numbers
import threading

import numpy as np
import pyproj

from ..abstractions.types import CellBounds, GeocodeCell
from ..config import config
from ..infrastructure.logging import get_logger, LoggingContext
from .exceptions import OutOfRangeError, DecodeError
from .geocode_variant import Geocode

logger = get_logger(__name__)

VariantLike = Union[Geocode, str]


def resolve_variant(variant: Optional[VariantLike] = None) -> Geocode:
    """Resolve a variant member or name; None means the configured default."""
    if variant is None:
        variant = config.get('geocoding.default_variant', 'geohash')
    if isinstance(variant, Geocode):
        return variant
    return Geocode.from_name(variant)


def _check_precision(precision) -> int:
    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
        raise ValueError(f"Precision must be an integer, got: {precision!r}")
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got: {precision}")
    return int(precision)


class SpaceEncoder:
    """
    Encoder for a single geocode variant.

    Each output character folds ``bits_per_symbol`` bisection bits. Bits
    alternate between axes starting with x, and the bit stream runs on
    across character boundaries. A coordinate sitting exactly on a midpoint
    falls in the lower half.
    """

    def __init__(self, variant: Optional[VariantLike] = None):
        """
        Initialize encoder.

        Args:
            variant: Geocode member or variant name (configured default if None)
        """
        self.variant = resolve_variant(variant)
        self.definition = self.variant.definition
        self._char_index: Dict[str, int] = {
            char: index for index, char in enumerate(self.definition.alphabet)
        }

    def __repr__(self) -> str:
        return f"SpaceEncoder({self.definition.name!r})"

    @property
    def bounds(self) -> CellBounds:
        return self.definition.bounds

    def encode(self, x: float, y: float, precision: Optional[int] = None) -> str:
        """
        Encode a coordinate.

        Args:
            x: X coordinate in the variant CRS (longitude or easting)
            y: Y coordinate in the variant CRS (latitude or northing)
            precision: Number of output characters (configured default if None);
                zero yields an empty code

        Returns:
            Geocode string of length ``precision``

        Raises:
            OutOfRangeError: coordinate outside the variant bounds (inclusive)
        """
        if precision is None:
            precision = config.get('geocoding.default_precision', 8)
        precision = _check_precision(precision)

        x = float(x)
        y = float(y)
        bounds = self.definition.bounds
        if not bounds.contains(x, y):
            raise OutOfRangeError(x, y, bounds)

        min_x, max_x, min_y, max_y = bounds.as_tuple()
        char_bits = self.definition.bits_per_symbol
        codes = self.definition.alphabet

        bits_total = 0
        hash_value = 0
        out: List[str] = []

        while len(out) < precision:
            for _ in range(char_bits):
                if bits_total % 2 == 0:
                    mid = (max_x + min_x) / 2
                    if x > mid:
                        hash_value = (hash_value << 1) + 1
                        min_x = mid
                    else:
                        hash_value <<= 1
                        max_x = mid
                else:
                    mid = (max_y + min_y) / 2
                    if y > mid:
                        hash_value = (hash_value << 1) + 1
                        min_y = mid
                    else:
                        hash_value <<= 1
                        max_y = mid
                bits_total += 1

            out.append(codes[hash_value])
            hash_value = 0

        return ''.join(out)

    def decode(self, code: str) -> CellBounds:
        """
        Decode a geocode to the cell it addresses.

        Replays the encoding bit stream, so ``decode(encode(x, y, p))`` is
        exactly the rectangle the encoder narrowed to.

        Args:
            code: Geocode string (case-sensitive); empty code is the whole variant

        Returns:
            CellBounds of the cell

        Raises:
            DecodeError: code contains a character outside the alphabet
        """
        min_x, max_x, min_y, max_y = self.definition.bounds.as_tuple()
        char_bits = self.definition.bits_per_symbol

        bits_total = 0
        for position, char in enumerate(code):
            hash_value = self._char_index.get(char)
            if hash_value is None:
                raise DecodeError(code, char, position, self.definition.name)

            for shift in range(char_bits - 1, -1, -1):
                bit = (hash_value >> shift) & 1
                if bits_total % 2 == 0:
                    mid = (max_x + min_x) / 2
                    if bit:
                        min_x = mid
                    else:
                        max_x = mid
                else:
                    mid = (max_y + min_y) / 2
                    if bit:
                        min_y = mid
                    else:
                        max_y = mid
                bits_total += 1

        return CellBounds(min_x, max_x, min_y, max_y)

    def get_epsg_code(self) -> int:
        """Get the EPSG code of the variant's coordinate reference system."""
        return self.definition.epsg_code

    def get_crs(self) -> pyproj.CRS:
        """Get the variant's coordinate reference system (informational only)."""
        return pyproj.CRS.from_epsg(self.definition.epsg_code)

    def get_intervals(self, precision: int) -> Tuple[float, float]:
        """
        Get cell size at a precision, without a coordinate.

        Encoding starts on x and strictly alternates, so over the whole code x
        receives the odd leftover bit when the total bit count is odd.

        Args:
            precision: Number of code characters

        Returns:
            (x_resolution, y_resolution) in CRS units
        """
        precision = _check_precision(precision)
        bounds = self.definition.bounds

        total_bits = precision * self.definition.bits_per_symbol
        x_bits = math.ceil(total_bits / 2)
        y_bits = total_bits // 2

        # ldexp underflows to 0.0 where 2 ** bits would overflow a float
        x_delta = math.ldexp(bounds.width, -x_bits)
        y_delta = math.ldexp(bounds.height, -y_bits)

        return (x_delta, y_delta)

    def get_cell(self, code: str) -> GeocodeCell:
        """
        Get the cell addressed by a code.

        Args:
            code: Geocode string

        Returns:
            GeocodeCell with shapely geometry in the variant CRS
        """
        return GeocodeCell.from_bounds(
            code=code,
            variant=self.definition.name,
            bounds=self.decode(code),
            metadata={'crs': self.definition.crs}
        )

    def encode_many(self,
                    points: Iterable[Tuple[float, float]],
                    precision: Optional[int] = None) -> List[str]:
        """
        Encode a batch of (x, y) coordinates.

        Fails on the first out-of-range coordinate.

        Args:
            points: Iterable of (x, y) pairs
            precision: Number of output characters per code

        Returns:
            Codes in input order

        Raises:
            ValueError: points are not (x, y) pairs
            OutOfRangeError: for the first coordinate outside the variant bounds
        """
        coords = np.asarray(list(points), dtype=np.float64)
        if coords.size == 0:
            coords = coords.reshape(0, 2)
        elif coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"Points must be (x, y) pairs, got array of shape {coords.shape}")
        if precision is None:
            precision = config.get('geocoding.default_precision', 8)

        ctx = LoggingContext(variant=self.definition.name)
        with ctx.operation('encode_many', precision=precision, items_processed=len(coords)):
            return self.encode_array(coords[:, 0], coords[:, 1], precision).tolist()

    def encode_array(self, x, y, precision: Optional[int] = None) -> np.ndarray:
        """
        Vectorized encode over coordinate arrays.

        Runs the same bisection as ``encode`` with every point advancing one
        bit at a time, so results match ``encode`` element for element.

        Args:
            x: Array-like of x coordinates
            y: Array-like of y coordinates, broadcastable against x
            precision: Number of output characters per code

        Returns:
            Unicode array of codes with the broadcast shape of x and y

        Raises:
            OutOfRangeError: for the first coordinate outside the variant bounds
        """
        if precision is None:
            precision = config.get('geocoding.default_precision', 8)
        precision = _check_precision(precision)

        x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                                   np.asarray(y, dtype=np.float64))
        shape = x.shape
        x = x.ravel()
        y = y.ravel()

        bounds = self.definition.bounds
        min_x, max_x, min_y, max_y = bounds.as_tuple()

        # NaN fails every comparison and lands here too
        valid = (x >= min_x) & (x <= max_x) & (y >= min_y) & (y <= max_y)
        if not valid.all():
            index = int(np.flatnonzero(~valid)[0])
            raise OutOfRangeError(float(x[index]), float(y[index]), bounds)

        lo_x = np.full(x.size, min_x)
        hi_x = np.full(x.size, max_x)
        lo_y = np.full(y.size, min_y)
        hi_y = np.full(y.size, max_y)

        char_bits = self.definition.bits_per_symbol
        codes = np.array(list(self.definition.alphabet))

        out = np.full(x.size, '', dtype='<U1')
        bits_total = 0
        for _ in range(precision):
            hash_value = np.zeros(x.size, dtype=np.int64)
            for _ in range(char_bits):
                if bits_total % 2 == 0:
                    mid = (hi_x + lo_x) / 2
                    upper = x > mid
                    lo_x = np.where(upper, mid, lo_x)
                    hi_x = np.where(upper, hi_x, mid)
                else:
                    mid = (hi_y + lo_y) / 2
                    upper = y > mid
                    lo_y = np.where(upper, mid, lo_y)
                    hi_y = np.where(upper, hi_y, mid)
                hash_value = (hash_value << 1) + upper
                bits_total += 1

            out = np.char.add(out, codes[hash_value])

        return out.reshape(shape)


# Encoder cache, one per variant
_encoders: Dict[Geocode, SpaceEncoder] = {}
_encoders_lock = threading.Lock()


def get_encoder(variant: Optional[VariantLike] = None) -> SpaceEncoder:
    """
    Get the shared encoder for a variant.

    Args:
        variant: Geocode member or variant name (configured default if None)

    Returns:
        SpaceEncoder instance
    """
    member = resolve_variant(variant)
    encoder = _encoders.get(member)
    if encoder is None:
        with _encoders_lock:
            encoder = _encoders.get(member)
            if encoder is None:
                encoder = SpaceEncoder(member)
                _encoders[member] = encoder
                logger.debug(f"Created encoder for {member.definition.name}")
    return encoder


def encode(variant: VariantLike, x: float, y: float, precision: int) -> str:
    """Encode (x, y) with the given variant."""
    return get_encoder(variant).encode(x, y, precision)


def decode(variant: VariantLike, code: str) -> CellBounds:
    """Decode a code of the given variant to its cell bounds."""
    return get_encoder(variant).decode(code)


def get_epsg_code(variant: VariantLike) -> int:
    """Get the EPSG code of the given variant."""
    return get_encoder(variant).get_epsg_code()


def get_intervals(variant: VariantLike, precision: int) -> Tuple[float, float]:
    """Get (x_resolution, y_resolution) of the given variant at a precision."""
    return get_encoder(variant).get_intervals(precision)


def get_cell(variant: VariantLike, code: str) -> GeocodeCell:
    """Get the cell addressed by a code of the given variant."""
    return get_encoder(variant).get_cell(code)
