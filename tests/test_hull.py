import pytest
from shapely.geometry import Polygon

from sombra.errors import DegenerateGeometryError
from sombra.hull import ShapelyConvexHull


def test_hull_of_square_and_translated_square():
    a = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    b = Polygon([(0, 2), (1, 2), (1, 3), (0, 3)])
    hull = ShapelyConvexHull()([a, b])
    assert hull.area == pytest.approx(3.0)
    assert hull.covers(a) and hull.covers(b)


def test_hull_is_counter_clockwise():
    cw = Polygon([(0, 0), (0, 1), (1, 1), (1, 0)])
    assert not cw.exterior.is_ccw
    assert ShapelyConvexHull()([cw, cw]).exterior.is_ccw


def test_concave_footprint_is_over_approximated():
    ell = Polygon([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)])
    hull = ShapelyConvexHull()([ell, ell])
    assert hull.area > ell.area


def test_collapsed_hull_is_rejected():
    flat = Polygon([(0, 0), (1, 1), (2, 2)])
    with pytest.raises(DegenerateGeometryError):
        ShapelyConvexHull()([flat, flat])
