import math

import pytest

from faithfinder.search.distance import EARTH_RADIUS_MILES, haversine_miles

POINTS = [
    (37.7749, -122.4194),
    (34.0522, -118.2437),
    (40.7128, -74.0060),
    (-33.8688, 151.2093),
    (0.0, 0.0),
    (89.9, 179.9),
]


def test_one_degree_of_latitude():
    expected = EARTH_RADIUS_MILES * math.pi / 180
    assert haversine_miles(0, 0, 1, 0) == pytest.approx(expected, rel=1e-9)


def test_san_francisco_to_los_angeles():
    assert haversine_miles(37.7749, -122.4194, 34.0522, -118.2437) == pytest.approx(347, abs=3)


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_distance_is_symmetric(a, b):
    forward = haversine_miles(a[0], a[1], b[0], b[1])
    backward = haversine_miles(b[0], b[1], a[0], a[1])
    assert forward == pytest.approx(backward, rel=1e-9, abs=1e-9)


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point):
    assert haversine_miles(point[0], point[1], point[0], point[1]) == 0


def test_out_of_range_input_does_not_raise():
    assert math.isfinite(haversine_miles(120, 0, 0, 400))
