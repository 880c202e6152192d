"""Shared fixtures for grid system tests."""

import pytest

from geocode.grid_systems import Geocode, SpaceEncoder


# Appleton, WI and Fort Collins, CO in EPSG:4326 and EPSG:3857
APPLETON_LAT_LONG = (-88.4, 44.266667)
APPLETON_MERCATOR = (-9840642.99, 5506802.68)
FORT_COLLINS_LAT_LONG = (-105.078056, 40.559167)
FORT_COLLINS_MERCATOR = (-11697235.69, 4947534.74)


@pytest.fixture
def geohash():
    """Create geohash (base 32) encoder."""
    return SpaceEncoder(Geocode.GEOHASH)


@pytest.fixture
def geohash16():
    """Create geohash (base 16) encoder."""
    return SpaceEncoder(Geocode.GEOHASH16)


@pytest.fixture
def quadtile():
    """Create quad-tile encoder."""
    return SpaceEncoder(Geocode.QUADTILE)


@pytest.fixture(params=list(Geocode), ids=lambda member: member.definition.name)
def any_encoder(request):
    """Encoder for every supported variant."""
    return SpaceEncoder(request.param)


@pytest.fixture
def sample_points():
    """Sample (x, y) points per variant, spread over the variant bounds."""
    lat_long = [
        APPLETON_LAT_LONG,
        FORT_COLLINS_LAT_LONG,
        (0.0, 0.0),
        (151.2093, -33.8688),
        (-0.1276, 51.5072),
        (139.6917, 35.6895),
        (-180.0, -90.0),
        (180.0, 90.0),
        (179.999999, -89.999999),
    ]
    mercator = [
        APPLETON_MERCATOR,
        FORT_COLLINS_MERCATOR,
        (0.0, 0.0),
        (16832959.61, -4011415.12),
        (-14205.09, 6711542.47),
        (-20037508.342789248, 20037508.342789248),
        (20037508.342789248, -20037508.342789248),
    ]
    return {
        Geocode.GEOHASH: lat_long,
        Geocode.GEOHASH16: lat_long,
        Geocode.QUADTILE: mercator,
    }
