import math

import numpy as np
import pytest

from neldermead import DimensionError, Point


class TestPointConstruction:
    """Point construction and dimension checks."""

    def test_valid_coords(self):
        point = Point([1.0, 2.0, 3.0], 3)
        assert point.dimension == 3
        assert point.dimensions() == 3
        assert len(point) == 3

    def test_dimension_inferred_from_coords(self):
        assert Point([1.5, 2.5]).dimension == 2

    def test_create_point_alias(self):
        point = Point.create_point([4.0], 1)
        assert point.get(0) == 4.0

    def test_empty_coords_rejected(self):
        with pytest.raises(DimensionError):
            Point([], 0)
        with pytest.raises(DimensionError):
            Point([])

    def test_mismatched_dimension_rejected(self):
        with pytest.raises(DimensionError, match="Expected 3 coordinates"):
            Point([1.0, 2.0], 3)

    def test_dimension_error_is_index_error(self):
        with pytest.raises(IndexError):
            Point([1.0], 2)

    def test_non_finite_coordinates_allowed(self):
        point = Point([math.inf, math.nan])
        assert math.isinf(point.get(0))
        assert math.isnan(point.get(1))

    def test_origin(self):
        assert Point.origin(3).to_list() == [0.0, 0.0, 0.0]
        with pytest.raises(DimensionError):
            Point.origin(0)


class TestPointAccess:
    """Coordinate reads and writes."""

    def test_get_returns_coordinates(self):
        point = Point([1.5, 2.5])
        assert point.get(0) == 1.5
        assert point.get(1) == 2.5
        assert point[1] == 2.5

    def test_get_out_of_range(self):
        point = Point([1.0, 2.0])
        with pytest.raises(DimensionError):
            point.get(2)
        with pytest.raises(DimensionError):
            point.get(-1)

    def test_set_modifies_single_coordinate(self):
        point = Point([1.0, 2.0])
        point.set(3.0, 0)
        assert point.get(0) == 3.0
        assert point.get(1) == 2.0

    def test_set_out_of_range(self):
        point = Point([1.0, 2.0])
        with pytest.raises(DimensionError):
            point.set(3.0, 2)

    def test_to_list_and_iteration(self):
        point = Point([1.1, 2.2, 3.3])
        assert point.to_list() == [1.1, 2.2, 3.3]
        assert list(point) == [1.1, 2.2, 3.3]


class TestPointOwnership:
    """Points never share storage."""

    def test_clone_is_independent(self):
        original = Point([1.0, 2.0])
        clone = original.clone()
        clone.set(3.0, 0)
        assert clone.get(0) == 3.0
        assert original.get(0) == 1.0

    def test_source_array_not_aliased(self):
        source = np.array([1.0, 2.0])
        point = Point(source)
        source[0] = 99.0
        assert point.get(0) == 1.0

    def test_as_array_returns_copy(self):
        point = Point([1.0, 2.0])
        array = point.as_array()
        array[0] = 99.0
        assert point.get(0) == 1.0

    def test_equality(self):
        assert Point([1.0, 2.0]) == Point([1.0, 2.0])
        assert Point([1.0, 2.0]) != Point([1.0, 2.5])
        assert Point([1.0]) != Point([1.0, 0.0])
