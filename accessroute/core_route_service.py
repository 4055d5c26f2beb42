"""
Accessibility Route Service: entry point for accessibility-aware routing
Owns the knowledge base and the rider's stored preferences, runs the grid A*
search and annotates found routes with the features along them
"""

import logging
import time
from typing import Iterable, List, Optional

from .cost_functions import make_accessibility_check, make_cost_function
from .exceptions import InvalidCoordinatesError, NoRouteFoundError
from .knowledge_base import (
    CLEARANCE_RADIUS_M,
    SEGMENT_THRESHOLD_M,
    AccessibilityKnowledgeBase,
)
from .logger import logger as route_logger
from .models.accessibility import (
    AccessibilityFeature,
    AccessibilityObstacle,
    AccessibilityPreferences,
    GeoPoint,
)
from .routing.algorithms import ARRIVAL_THRESHOLD_M, GRID_SIZE_DEG, grid_astar
from .routing.annotation import features_on_route


def validate_coordinates(point: GeoPoint) -> None:
    """Raise InvalidCoordinatesError for a point outside WGS84 bounds"""
    if not (-90 <= point.latitude <= 90 and -180 <= point.longitude <= 180):
        raise InvalidCoordinatesError(
            f"Invalid coordinates: ({point.latitude}, {point.longitude})"
        )


class AccessibilityRouteService:
    """
    Accessibility route service that:
    1. Keeps the reported obstacles and features in a knowledge base
    2. Finds routes with grid A*, excluding or penalizing segments per preferences
    3. Lists the active features along a found route for narration
    """

    def __init__(self,
                 features: Optional[Iterable[AccessibilityFeature]] = None,
                 obstacles: Optional[Iterable[AccessibilityObstacle]] = None,
                 grid_size: float = GRID_SIZE_DEG,
                 arrival_threshold_m: float = ARRIVAL_THRESHOLD_M,
                 feature_radius_m: float = SEGMENT_THRESHOLD_M,
                 clearance_radius_m: float = CLEARANCE_RADIUS_M,
                 max_expansions: Optional[int] = None):
        """Initialize the route service"""
        self.logger = logging.getLogger(__name__)
        self.knowledge_base = AccessibilityKnowledgeBase(features, obstacles)
        self._preferences: Optional[AccessibilityPreferences] = None

        # Configuration
        self.grid_size = grid_size
        self.arrival_threshold_m = arrival_threshold_m
        self.feature_radius_m = feature_radius_m
        self.clearance_radius_m = clearance_radius_m
        self.max_expansions = max_expansions

    @classmethod
    def from_config(cls, cfg, **kwargs) -> 'AccessibilityRouteService':
        """Build a service from a Config's router settings"""
        options = cfg.get_router_config()
        options.update(kwargs)
        return cls(**options)

    @property
    def preferences(self) -> AccessibilityPreferences:
        """Stored preferences, or the defaults when none were set"""
        return self._preferences or AccessibilityPreferences()

    def set_preferences(self, preferences: AccessibilityPreferences) -> None:
        self._preferences = preferences
        self.logger.info(f"Preferences updated: {preferences}")

    def add_feature(self, feature: AccessibilityFeature) -> None:
        validate_coordinates(feature.location)
        self.knowledge_base.add_feature(feature)

    def add_obstacle(self, obstacle: AccessibilityObstacle) -> None:
        validate_coordinates(obstacle.location)
        self.knowledge_base.add_obstacle(obstacle)

    def remove_obstacles_near(self, point: GeoPoint) -> None:
        self.knowledge_base.remove_obstacles_near(point, self.clearance_radius_m)

    def find_accessible_route(self, start: GeoPoint, end: GeoPoint,
                              preferences: Optional[AccessibilityPreferences] = None) -> List[GeoPoint]:
        """
        Find a route from start to within the arrival threshold of end.

        Args:
            start, end: Route endpoints
            preferences: Overrides the stored preferences for this search

        Returns:
            Route points, start first

        Raises:
            NoRouteFoundError: If every path is blocked under the preferences
            InvalidCoordinatesError: If an endpoint is out of bounds
        """
        validate_coordinates(start)
        validate_coordinates(end)
        prefs = preferences if preferences is not None else self.preferences

        started = time.perf_counter()
        success = False
        try:
            route = grid_astar(
                start, end,
                cost_func=make_cost_function(prefs, self.knowledge_base, self.feature_radius_m),
                is_accessible=make_accessibility_check(prefs, self.knowledge_base),
                grid_size=self.grid_size,
                arrival_threshold_m=self.arrival_threshold_m,
                max_expansions=self.max_expansions,
            )
            success = True
            return route
        except NoRouteFoundError as e:
            self.logger.warning(f"No accessible route from {start} to {end}: {e}")
            raise
        finally:
            duration_ms = (time.perf_counter() - started) * 1000
            route_logger.log_route_request(
                (start.latitude, start.longitude), (end.latitude, end.longitude),
                prefs, duration_ms, success
            )

    def features_on_route(self, route: List[GeoPoint]) -> List[AccessibilityFeature]:
        """Active features along the route, nearest to its start first"""
        return features_on_route(route, self.knowledge_base, self.feature_radius_m)
