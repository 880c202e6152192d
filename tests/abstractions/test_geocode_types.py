"""Tests for geocode cell types."""

import pytest
from shapely.geometry import Point

from geocode.abstractions.types import CellBounds, GeocodeCell


class TestCellBounds:
    """Test CellBounds class."""

    def test_dimensions(self):
        bounds = CellBounds(0, 10, -5, 5)

        assert bounds.width == 10
        assert bounds.height == 10
        assert bounds.center == (5, 0)

    def test_tuple_orders(self):
        """Test variant order and shapely order."""
        bounds = CellBounds(1, 2, 3, 4)

        assert bounds.as_tuple() == (1, 2, 3, 4)
        assert bounds.bounds == (1, 3, 2, 4)

    def test_polygon_property(self):
        poly = CellBounds(0, 10, 0, 10).polygon

        assert poly.bounds == (0, 0, 10, 10)
        assert poly.area == 100

    def test_contains_point(self):
        """Test point containment with inclusive edges."""
        bounds = CellBounds(0, 10, 0, 10)

        assert bounds.contains(5, 5)      # Inside
        assert bounds.contains(0, 0)      # Corner
        assert bounds.contains(10, 10)    # Opposite corner
        assert not bounds.contains(-1, 5)  # Outside
        assert not bounds.contains(5, 11)  # Outside

    def test_str(self):
        assert str(CellBounds(-180.0, 180.0, -90.0, 90.0)) == "(-180.0 - 180.0, -90.0 - 90.0)"

    def test_frozen(self):
        bounds = CellBounds(0, 1, 0, 1)
        with pytest.raises(AttributeError):
            bounds.min_x = 5


class TestGeocodeCell:
    """Test GeocodeCell class."""

    def test_from_bounds(self):
        """Test geometry is derived from bounds."""
        cell = GeocodeCell.from_bounds('3', 'quadtile', CellBounds(0, 4, -4, 0))

        assert cell.geometry.bounds == (0, -4, 4, 0)
        assert cell.centroid.equals(Point(2, -2))
        assert cell.precision == 1
        assert cell.metadata is None

    def test_to_dict(self):
        cell = GeocodeCell.from_bounds('7', 'geohash', CellBounds(-45, 0, -45, 0),
                                       metadata={'crs': 'EPSG:4326'})
        data = cell.to_dict()

        assert data['code'] == '7'
        assert data['variant'] == 'geohash'
        assert data['bounds'] == (-45, 0, -45, 0)
        assert data['centroid_wkt'] == 'POINT (-22.5 -22.5)'
        assert data['metadata'] == {'crs': 'EPSG:4326'}

    def test_to_dict_empty_metadata(self):
        cell = GeocodeCell.from_bounds('', 'geohash', CellBounds(0, 1, 0, 1))
        assert cell.to_dict()['metadata'] == {}
