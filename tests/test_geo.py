"""
tests/test_geo.py

Unit tests for todo_gateway/services/geo.py.
"""

import math

import pytest

from todo_gateway.constants import EARTH_RADIUS_M
from todo_gateway.schemas import Coordinate
from todo_gateway.services.geo import distance, haversine_distance
from tests.fixtures import OAKLAND_LAT, OAKLAND_LNG, SF_LAT, SF_LNG, sf_point


def test_distance_to_self_is_exactly_zero() -> None:
    """A coordinate is zero meters from itself."""
    assert distance(sf_point(), sf_point()) == 0
    pole = Coordinate(latitude=90, longitude=180)
    assert distance(pole, pole) == 0


@pytest.mark.parametrize(
    "a, b",
    [
        ((SF_LAT, SF_LNG), (OAKLAND_LAT, OAKLAND_LNG)),
        ((0.0, 0.0), (0.0, 90.0)),
        ((-33.8688, 151.2093), (51.5074, -0.1278)),
        ((89.9, 10.0), (-89.9, -170.0)),
    ],
)
def test_distance_is_symmetric(a: tuple, b: tuple) -> None:
    """Swapping the arguments does not change the distance."""
    pa = Coordinate(latitude=a[0], longitude=a[1])
    pb = Coordinate(latitude=b[0], longitude=b[1])
    d = distance(pa, pb)
    assert d == distance(pb, pa)
    assert d > 0
    assert math.isfinite(d)


def test_quarter_great_circle() -> None:
    """(0, 0) to (0, 90) spans a quarter of the great circle."""
    d = distance(
        Coordinate(latitude=0, longitude=0),
        Coordinate(latitude=0, longitude=90),
    )
    assert d == pytest.approx(10_007_543, abs=1000)
    assert d == pytest.approx(EARTH_RADIUS_M * math.pi / 2)


def test_antipodal_points_are_half_circumference_apart() -> None:
    d = haversine_distance(0.0, 0.0, 0.0, 180.0)
    assert d == pytest.approx(EARTH_RADIUS_M * math.pi)


def test_sf_to_oakland_known_distance() -> None:
    """San Francisco to Oakland is about 13 km."""
    d = haversine_distance(SF_LAT, SF_LNG, OAKLAND_LAT, OAKLAND_LNG)
    assert 12_000 < d < 14_000


def test_out_of_range_input_still_finite() -> None:
    """Range checks are the caller's job; the result is still a finite distance."""
    d = haversine_distance(120.0, 400.0, -95.0, -720.5)
    assert math.isfinite(d)
    assert 0 <= d <= EARTH_RADIUS_M * math.pi
