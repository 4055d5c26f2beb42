import pytest

from accessroute.guidance import (
    Feedback,
    announcement_interval_ms,
    build_guidance,
    describe_route_features,
    describe_route_start,
)
from accessroute.models.accessibility import AccessibilityFeature, FeatureType, GeoPoint


@pytest.mark.parametrize("distance,interval", [(10, 3000), (49.9, 3000), (75, 5000), (100, 10000), (400, 10000)])
def test_announcement_interval(distance, interval):
    assert announcement_interval_ms(distance) == interval


def test_custom_intervals():
    assert announcement_interval_ms(10, (1, 2, 3)) == 1


def test_arrival():
    guidance = build_guidance(3.2, 'east', True)
    assert guidance.message == 'You have arrived at your destination'
    assert guidance.feedback is Feedback.SUCCESS


def test_destination_ahead_rounds_half_up():
    guidance = build_guidance(12.5, 'north', False)
    assert guidance.message == 'Your destination is 13 meters ahead. Head north'
    assert guidance.feedback is Feedback.HEAVY


def test_getting_close():
    guidance = build_guidance(33.4, 'east', True)
    assert guidance.message == 'Getting close. 33 meters to go. Continue east'
    assert guidance.feedback is Feedback.MEDIUM


def test_far_guidance_feedback_depends_on_progress():
    assert build_guidance(120, 'south', True).feedback is Feedback.LIGHT
    far = build_guidance(120, 'south', False)
    assert far.message == 'Continue south for 120 meters'
    assert far.feedback is Feedback.NONE


def test_route_start_messages():
    messages = describe_route_start(66.7, 'east')
    assert messages[0].startswith('Starting accessible navigation')
    assert messages[1] == "Your destination is 67 meters away. I'll guide you along an accessible route. Head east"


def test_route_feature_message():
    features = [
        AccessibilityFeature(FeatureType.REST_AREA, GeoPoint(0, 0), 'Bench by the fountain'),
        AccessibilityFeature(FeatureType.ELEVATOR, GeoPoint(0, 0), 'Elevator to the platform'),
    ]
    assert describe_route_features(features) == (
        "Along this route, you'll find: Bench by the fountain. Elevator to the platform"
    )
    assert describe_route_features([]) is None
