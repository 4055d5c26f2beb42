"""
Spoken guidance content for a rider heading to a destination
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .models.accessibility import AccessibilityFeature

# Announcement intervals (ms) by distance band
CLOSE_INTERVAL_MS = 3000
MEDIUM_INTERVAL_MS = 5000
FAR_INTERVAL_MS = 10000

ARRIVED_M = 5
AHEAD_M = 20
CLOSE_M = 50
MEDIUM_M = 100


class Feedback(str, Enum):
    """Haptic pattern that should accompany a message"""
    SUCCESS = 'success'
    HEAVY = 'heavy'
    MEDIUM = 'medium'
    LIGHT = 'light'
    NONE = 'none'


@dataclass
class Guidance:
    message: str
    feedback: Feedback
    distance_m: Optional[float] = None
    direction: Optional[str] = None


def _whole_meters(distance_m: float) -> int:
    return int(math.floor(distance_m + 0.5))


def announcement_interval_ms(distance_m: float,
                             intervals_ms: Sequence[int] = (CLOSE_INTERVAL_MS, MEDIUM_INTERVAL_MS, FAR_INTERVAL_MS)) -> int:
    """Minimum time between announcements; shorter as the destination nears"""
    close, medium, far = intervals_ms
    if distance_m < CLOSE_M:
        return close
    if distance_m < MEDIUM_M:
        return medium
    return far


def build_guidance(distance_m: float, direction: str, getting_closer: bool) -> Guidance:
    meters = _whole_meters(distance_m)
    if distance_m < ARRIVED_M:
        return Guidance('You have arrived at your destination', Feedback.SUCCESS, distance_m, direction)
    if distance_m < AHEAD_M:
        message = f"Your destination is {meters} meters ahead. Head {direction}"
        return Guidance(message, Feedback.HEAVY, distance_m, direction)
    if distance_m < CLOSE_M:
        message = f"Getting close. {meters} meters to go. Continue {direction}"
        return Guidance(message, Feedback.MEDIUM, distance_m, direction)
    message = f"Continue {direction} for {meters} meters"
    return Guidance(message, Feedback.LIGHT if getting_closer else Feedback.NONE, distance_m, direction)


def describe_route_start(distance_m: float, direction: str) -> List[str]:
    return [
        'Starting accessible navigation. Please hold your device in front of you.',
        f"Your destination is {_whole_meters(distance_m)} meters away. "
        f"I'll guide you along an accessible route. Head {direction}",
    ]


def describe_route_features(features: List[AccessibilityFeature]) -> Optional[str]:
    """One sentence listing the features along a route, None when there are none"""
    if not features:
        return None
    return "Along this route, you'll find: " + '. '.join(f.description for f in features)
