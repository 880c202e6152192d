"""Geocode-specific exceptions for better error handling."""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..abstractions.types import CellBounds


class GeocodeError(Exception):
    """Base geocode error."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class OutOfRangeError(GeocodeError):
    """Raised when a coordinate falls outside a variant's bounds."""
    def __init__(self, x: float, y: float, bounds: 'CellBounds'):
        super().__init__(
            f"coordinate ({x}, {y}) is outside of geocode range {bounds}"
        )
        self.x = x
        self.y = y
        self.bounds = bounds


class DecodeError(GeocodeError):
    """Raised when a code contains a character outside the variant alphabet."""
    def __init__(self, code: str, character: str, position: int, variant: str = ''):
        scope = f" for {variant}" if variant else ''
        super().__init__(
            f"invalid character {character!r} at position {position} in code {code!r}{scope}"
        )
        self.code = code
        self.character = character
        self.position = position
        self.variant = variant
