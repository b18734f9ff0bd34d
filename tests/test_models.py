import math
from datetime import datetime, timezone

import pytest

from wristtrack.models import ActivityCoordinate, ActivitySample, GeoCoordinate


def test_default_coordinate_is_invalid():
    assert GeoCoordinate().is_valid() is False


def test_coordinate_with_lat_lon_is_valid():
    assert GeoCoordinate(52.5, 13.4).is_valid() is True


def test_coordinate_without_altitude_is_still_valid():
    coord = GeoCoordinate(latitude=10.0, longitude=20.0)
    assert math.isnan(coord.altitude)
    assert coord.is_valid()


@pytest.mark.parametrize(
    "lat, lon",
    [(91.0, 0.0), (-91.0, 0.0), (0.0, 181.0), (0.0, -181.0), (math.nan, 0.0), (0.0, math.nan)],
)
def test_out_of_range_coordinates_are_invalid(lat, lon):
    assert GeoCoordinate(lat, lon).is_valid() is False


def test_unset_coordinates_compare_equal():
    first = GeoCoordinate()
    second = GeoCoordinate()
    assert math.isnan(first.latitude)
    assert math.isnan(first.longitude)
    assert (first == second) is True


def test_coordinate_equality_and_difference():
    assert GeoCoordinate(1.5, 2.5, 3.0) == GeoCoordinate(1.5, 2.5, 3.0)
    assert not GeoCoordinate(1.5, 2.5, 3.0) == GeoCoordinate(1.5, 2.5, 4.0)
    assert not GeoCoordinate(1.5, 2.5) == GeoCoordinate()


def test_coordinate_is_immutable():
    coord = GeoCoordinate(1.0, 2.0)
    with pytest.raises(AttributeError):
        coord.latitude = 5.0  # type: ignore[misc]
    assert coord.latitude == 1.0
    assert coord == GeoCoordinate(1.0, 2.0)


def test_activity_coordinate_defaults():
    point = ActivityCoordinate()
    assert point.heart_rate == 0
    assert point.timestamp is None
    assert point.coordinate == GeoCoordinate()


def test_activity_coordinate_equality_covers_all_fields():
    when = datetime(2020, 5, 1, 12, 0, tzinfo=timezone.utc)
    a = ActivityCoordinate(GeoCoordinate(1.0, 2.0, 3.0), when, 80)
    b = ActivityCoordinate(GeoCoordinate(1.0, 2.0, 3.0), when, 80)
    assert a == b
    b.heart_rate = 81
    assert not a == b
    b.heart_rate = 80
    b.timestamp = None
    assert not a == b


def test_activity_sample_keeps_values():
    sample = ActivitySample(kind=1, intensity=20, steps=30, heart_rate=70)
    assert (sample.kind, sample.intensity, sample.steps, sample.heart_rate) == (1, 20, 30, 70)