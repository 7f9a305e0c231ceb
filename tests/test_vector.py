import math

import pytest

from convex_hull.vector import Point, orientation, euclidean_dist


def test_point_equals_tuple():
    assert Point(1, 2) == (1, 2)
    assert Point.of([1, 2]) == Point(1, 2)
    p = Point(3, 4)
    assert Point.of(p) is p


def test_point_of_rejects_wrong_arity():
    with pytest.raises(ValueError):
        Point.of((1, 2, 3))


def test_subtraction_and_cross():
    d = Point(3, 5) - Point(1, 1)
    assert d == Point(2, 4)
    assert isinstance(d, Point)
    assert Point(1, 0).cross(Point(0, 1)) == 1
    assert Point(0, 1).cross(Point(1, 0)) == -1
    assert Point(2, 2).cross(Point(4, 4)) == 0


@pytest.mark.parametrize(
    "p1,p2,p3,expected",
    [
        ((0, 0), (1, 0), (1, 1), 1),
        ((0, 0), (1, 0), (1, -1), -1),
        ((0, 0), (1, 0), (2, 0), 0),
        ((0, 0), (1, 1), (0, 0), 0),
    ]
)
def test_orientation(p1, p2, p3, expected):
    assert orientation(p1, p2, p3) == expected


def test_euclidean_dist():
    assert euclidean_dist((0, 0), (3, 4)) == 5
    assert euclidean_dist((1, 1), (1, 1)) == 0
    assert math.isclose(euclidean_dist((0, 0), (1, 1)), math.sqrt(2))
