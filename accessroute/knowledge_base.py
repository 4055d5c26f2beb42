"""
In-memory store of reported accessibility obstacles and features.

The collections are owned by a single writer; callers sharing a knowledge base
across threads must serialize access themselves.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .models.accessibility import (
    AccessibilityFeature,
    AccessibilityObstacle,
    AccessibilityPreferences,
    GeoPoint,
    ObstacleType,
)
from .utils.geo_utils import haversine_distance, is_point_near_segment

# Obstacles closer than this to a point gate its accessibility (meters)
ACCESSIBILITY_RADIUS_M = 20.0
# Default segment-near threshold for features and obstacles (meters)
SEGMENT_THRESHOLD_M = 20.0
# Obstacles this close to a cleared location are purged (meters)
CLEARANCE_RADIUS_M = 1.0

# Obstacle types a wheelchair user cannot pass
WHEELCHAIR_BLOCKING = frozenset({ObstacleType.STAIRS, ObstacleType.NARROW_PATH})


class AccessibilityKnowledgeBase:
    """Obstacles and features known to the router, in insertion order"""

    def __init__(self, features: Optional[Iterable[AccessibilityFeature]] = None,
                 obstacles: Optional[Iterable[AccessibilityObstacle]] = None):
        self.logger = logging.getLogger(__name__)
        self._features: List[AccessibilityFeature] = list(features or [])
        self._obstacles: List[AccessibilityObstacle] = list(obstacles or [])

    @property
    def features(self) -> Tuple[AccessibilityFeature, ...]:
        return tuple(self._features)

    @property
    def obstacles(self) -> Tuple[AccessibilityObstacle, ...]:
        return tuple(self._obstacles)

    def add_feature(self, feature: AccessibilityFeature) -> None:
        self._features.append(feature)
        self.logger.debug(f"Added {feature.type.value} feature at {feature.location}")

    def add_obstacle(self, obstacle: AccessibilityObstacle) -> None:
        self._obstacles.append(obstacle)
        self.logger.debug(f"Added {obstacle.type.value} obstacle at {obstacle.location}")

    def remove_obstacles_near(self, point: GeoPoint, radius_m: float = CLEARANCE_RADIUS_M) -> int:
        """Purge every obstacle within radius_m of point. Returns the number removed."""
        kept = [obs for obs in self._obstacles
                if haversine_distance(obs.location, point) > radius_m]
        removed = len(self._obstacles) - len(kept)
        self._obstacles = kept
        if removed:
            self.logger.info(f"Removed {removed} obstacle(s) near {point}")
        return removed

    def clear(self) -> None:
        self._features = []
        self._obstacles = []

    def features_near_segment(self, start: GeoPoint, end: GeoPoint,
                              threshold_m: float = SEGMENT_THRESHOLD_M) -> List[AccessibilityFeature]:
        """Features inside the ellipse around start-end, active or not"""
        return [f for f in self._features
                if is_point_near_segment(f.location, start, end, threshold_m)]

    def obstacles_near_segment(self, start: GeoPoint, end: GeoPoint,
                               threshold_m: float = SEGMENT_THRESHOLD_M) -> List[AccessibilityObstacle]:
        """Obstacles inside the ellipse around start-end"""
        return [o for o in self._obstacles
                if is_point_near_segment(o.location, start, end, threshold_m)]

    def obstacles_near_point(self, point: GeoPoint,
                             radius_m: float = ACCESSIBILITY_RADIUS_M) -> List[AccessibilityObstacle]:
        return [o for o in self._obstacles
                if haversine_distance(point, o.location) < radius_m]

    def is_point_accessible(self, point: GeoPoint, preferences: AccessibilityPreferences) -> bool:
        """Only obstacles gate accessibility; features never do."""
        if not preferences.requires_wheelchair_access:
            return True
        return not any(o.type in WHEELCHAIR_BLOCKING
                       for o in self.obstacles_near_point(point))
