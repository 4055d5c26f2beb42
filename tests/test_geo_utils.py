import math

import pytest

from accessroute.models.accessibility import GeoPoint
from accessroute.utils.geo_utils import (
    cardinal_direction,
    haversine_distance,
    initial_bearing,
    is_point_near_segment,
)

SEATTLE = GeoPoint(47.6062, -122.3321)
PIKE_PLACE = GeoPoint(47.6097, -122.3422)


def test_distance_to_self_is_zero():
    assert haversine_distance(SEATTLE, SEATTLE) == 0


def test_distance_is_symmetric():
    assert haversine_distance(SEATTLE, PIKE_PLACE) == pytest.approx(haversine_distance(PIKE_PLACE, SEATTLE))


def test_one_degree_of_longitude_at_equator():
    expected = 6371000 * math.pi / 180
    assert haversine_distance(GeoPoint(0, 0), GeoPoint(0, 1)) == pytest.approx(expected)


def test_grid_step_is_about_eleven_meters():
    assert haversine_distance(GeoPoint(0, 0), GeoPoint(0.0001, 0)) == pytest.approx(11.12, abs=0.01)


@pytest.mark.parametrize("end,expected", [
    (GeoPoint(1, 0), 0),
    (GeoPoint(0, 1), 90),
    (GeoPoint(-1, 0), 180),
    (GeoPoint(0, -1), 270),
])
def test_bearing_along_axes(end, expected):
    assert initial_bearing(GeoPoint(0, 0), end) == pytest.approx(expected)


def test_bearing_is_in_range():
    bearing = initial_bearing(PIKE_PLACE, SEATTLE)
    assert 0 <= bearing < 360
    assert cardinal_direction(bearing) == 'southeast'


@pytest.mark.parametrize("bearing,direction", [
    (0, 'north'),
    (90, 'east'),
    (359, 'north'),
    (180, 'south'),
    (22.5, 'northeast'),
    (22.4, 'north'),
    (247.5, 'west'),
    (315, 'northwest'),
])
def test_cardinal_direction(bearing, direction):
    assert cardinal_direction(bearing) == direction


def test_point_on_segment_is_near():
    assert is_point_near_segment(GeoPoint(0, 0.00005), GeoPoint(0, 0), GeoPoint(0, 0.0001), 20)


def test_point_far_from_segment_is_not_near():
    assert not is_point_near_segment(GeoPoint(0.001, 0.00005), GeoPoint(0, 0), GeoPoint(0, 0.0001), 20)


def test_point_past_segment_end_is_near_within_threshold():
    # ~5.5 m beyond the east end: d1 + d2 exceeds the length by ~11 m
    assert is_point_near_segment(GeoPoint(0, 0.00015), GeoPoint(0, 0), GeoPoint(0, 0.0001), 20)
