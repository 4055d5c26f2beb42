"""
Navigation session: tracks the rider's location against an accessible route
and decides when to announce guidance.
"""

import logging
from typing import List, Optional, Sequence

from .exceptions import LocationUnavailableError
from .guidance import (
    CLOSE_INTERVAL_MS,
    FAR_INTERVAL_MS,
    MEDIUM_INTERVAL_MS,
    Guidance,
    announcement_interval_ms,
    build_guidance,
    describe_route_features,
    describe_route_start,
)
from .models.accessibility import AccessibilityPreferences, GeoPoint, NavigationState
from .utils.geo_utils import cardinal_direction, haversine_distance, initial_bearing

MINIMUM_DISTANCE_CHANGE_M = 1.0
ROUTE_UPDATED_MESSAGE = 'Route updated based on your accessibility preferences'


class NavigationSession:
    """One rider's trip: location updates in, route and announcements out"""

    def __init__(self, service, preferences: Optional[AccessibilityPreferences] = None,
                 minimum_distance_change_m: float = MINIMUM_DISTANCE_CHANGE_M,
                 intervals_ms: Sequence[int] = (CLOSE_INTERVAL_MS, MEDIUM_INTERVAL_MS, FAR_INTERVAL_MS)):
        self.logger = logging.getLogger(__name__)
        self.service = service
        self.preferences = preferences or AccessibilityPreferences()
        self.minimum_distance_change_m = minimum_distance_change_m
        self.intervals_ms = tuple(intervals_ms)
        self.state = NavigationState()
        self._last_announcement_ms: Optional[float] = None
        self._last_distance_m: Optional[float] = None

    def update_location(self, point: GeoPoint) -> bool:
        """Accept a device fix unless it moved less than the minimum distance change"""
        current = self.state.current_location
        if current is not None and haversine_distance(current, point) < self.minimum_distance_change_m:
            return False
        self.state.current_location = point
        return True

    def select_destination(self, destination: GeoPoint) -> List[str]:
        """Route to destination and start navigating. Returns the opening announcements."""
        origin = self.state.current_location
        if origin is None:
            raise LocationUnavailableError('Current location not available')

        route = self.service.find_accessible_route(origin, destination, self.preferences)
        self.state.destination = destination
        self.state.route = route
        self.state.is_navigating = True
        self._last_announcement_ms = None
        self._last_distance_m = None
        self.logger.info(f"Navigating to {destination} along {len(route)} points")

        direction = cardinal_direction(initial_bearing(origin, destination))
        messages = describe_route_start(haversine_distance(origin, destination), direction)
        features_message = describe_route_features(self.service.features_on_route(route))
        if features_message:
            messages.append(features_message)
        return messages

    def update_preferences(self, preferences: AccessibilityPreferences) -> Optional[str]:
        """Store new preferences; re-route an active trip with them.

        Raises NoRouteFoundError without touching the current route when the
        new preferences block every path.
        """
        self.preferences = preferences
        self.service.set_preferences(preferences)
        if self.state.destination is None or self.state.current_location is None:
            return None
        self.state.route = self.service.find_accessible_route(
            self.state.current_location, self.state.destination, preferences
        )
        return ROUTE_UPDATED_MESSAGE

    def next_guidance(self, now_ms: float) -> Optional[Guidance]:
        """Guidance due at now_ms, or None while navigation is idle or throttled"""
        current, destination = self.state.current_location, self.state.destination
        if not self.state.is_navigating or current is None or destination is None:
            return None

        distance = haversine_distance(current, destination)
        getting_closer = self._last_distance_m is not None and distance < self._last_distance_m
        self._last_distance_m = distance

        if self._last_announcement_ms is not None:
            interval = announcement_interval_ms(distance, self.intervals_ms)
            if now_ms - self._last_announcement_ms < interval:
                return None
        self._last_announcement_ms = now_ms

        direction = cardinal_direction(initial_bearing(current, destination))
        return build_guidance(distance, direction, getting_closer)

    def stop(self) -> None:
        self.state.is_navigating = False
