import dataclasses

import pytest

from hokg.point import INFINITY, Infinity, Point


def test_points_with_same_coordinates_are_equal():
    first = Point(1, 2)
    second = Point(1, 2)
    assert (first.x, first.y) == (1, 2)
    assert (first == second) is True
    assert hash(first) == hash(second)


def test_points_with_swapped_coordinates_differ():
    assert (Point(1, 2) == Point(2, 1)) is False


def test_infinity_instances_are_equal():
    assert Infinity() == INFINITY
    assert len({Infinity(), INFINITY}) == 1


def test_point_is_not_infinity():
    assert (Point(0, 0) == INFINITY) is False


def test_point_str_matches_coordinates_form():
    assert str(Point(22, 0)) == "Coordinates(22, 0)"


def test_infinity_str():
    point = Infinity()
    assert str(point) == "Infinity"


def test_point_is_immutable():
    point = Point(3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 5  # type: ignore[misc]
    assert point.x == 3