import math

import pytest

from backend.recommendations.geo import distance_km, distance_meters
from backend.recommendations.models import GeoPoint


def test_same_point_is_zero():
    p = GeoPoint(latitude=12.97, longitude=77.59)
    assert distance_meters(p, p) == 0.0


def test_one_degree_of_longitude_on_equator():
    a = GeoPoint(latitude=0.0, longitude=0.0)
    b = GeoPoint(latitude=0.0, longitude=1.0)
    assert distance_meters(a, b) / 1000 == pytest.approx(111.195, abs=0.01)


def test_distance_is_symmetric_and_non_negative():
    a = GeoPoint(latitude=12.9352, longitude=77.6245)
    b = GeoPoint(latitude=-33.86, longitude=151.21)
    assert distance_meters(a, b) == pytest.approx(distance_meters(b, a))
    assert distance_meters(a, b) > 0


def test_farther_points_are_farther():
    origin = GeoPoint(latitude=0.0, longitude=0.0)
    near = GeoPoint(latitude=0.5, longitude=0.5)
    far = GeoPoint(latitude=1.0, longitude=1.0)
    assert distance_meters(origin, near) < distance_meters(origin, far)


def test_antipodal_points():
    a = GeoPoint(latitude=0.0, longitude=0.0)
    b = GeoPoint(latitude=0.0, longitude=180.0)
    assert distance_meters(a, b) == pytest.approx(math.pi * 6_371_008.8)


def test_distance_km_rounds_to_two_places():
    a = GeoPoint(latitude=0.0, longitude=0.0)
    b = GeoPoint(latitude=0.0, longitude=1.0)
    assert distance_km(a, b) == 111.2


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_coordinates_raise(bad):
    a = GeoPoint(latitude=bad, longitude=0.0)
    b = GeoPoint(latitude=0.0, longitude=0.0)
    with pytest.raises(ValueError):
        distance_meters(a, b)


def test_half_location_is_no_location():
    assert GeoPoint.from_pair(12.9, None) is None
    assert GeoPoint.from_pair(None, 77.6) is None
    assert GeoPoint.from_pair(0.0, 0.0) == GeoPoint(latitude=0.0, longitude=0.0)
