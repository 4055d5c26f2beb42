# Cost functions for the grid A* search, matching routing/algorithms.py

import math

from .knowledge_base import SEGMENT_THRESHOLD_M, WHEELCHAIR_BLOCKING
from .models.accessibility import FeatureType, ObstacleType
from .utils.geo_utils import haversine_distance

POOR_LIGHTING_PENALTY = 1.5   # Dark segments cost half again when well-lit is preferred
STEP_FREE_DISCOUNT = 0.8      # Ramps and elevators for wheelchair users
REST_AREA_DISCOUNT = 0.9      # Rest areas when rest stops are needed

STEP_FREE_FEATURES = frozenset({FeatureType.RAMP, FeatureType.ELEVATOR})


def edge_weight(start, end, preferences, knowledge_base, threshold_m=SEGMENT_THRESHOLD_M):
    """Compute edge cost: base distance, scaled by every obstacle and feature
    near the segment in the order the knowledge base holds them.

    Returns ``math.inf`` for a segment a wheelchair user cannot take.
    """
    weight = haversine_distance(start, end)

    # ---------------- Obstacle penalties ----------------
    for obstacle in knowledge_base.obstacles_near_segment(start, end, threshold_m):
        if preferences.requires_wheelchair_access and obstacle.type in WHEELCHAIR_BLOCKING:
            return math.inf
        if preferences.prefer_well_lit and obstacle.type == ObstacleType.POOR_LIGHTING:
            weight *= POOR_LIGHTING_PENALTY

    # ---------------- Feature discounts ----------------
    for feature in knowledge_base.features_near_segment(start, end, threshold_m):
        if preferences.requires_wheelchair_access and feature.type in STEP_FREE_FEATURES:
            weight *= STEP_FREE_DISCOUNT
        if preferences.needs_rest_stops and feature.type == FeatureType.REST_AREA:
            weight *= REST_AREA_DISCOUNT

    return weight


def make_cost_function(preferences, knowledge_base, threshold_m=SEGMENT_THRESHOLD_M):
    """Return a (u, v) -> weight function bound to the given preferences"""
    def cost_func(u, v):
        return edge_weight(u, v, preferences, knowledge_base, threshold_m)
    return cost_func


def make_accessibility_check(preferences, knowledge_base):
    """Return a point -> bool predicate bound to the given preferences"""
    def is_accessible(point):
        return knowledge_base.is_point_accessible(point, preferences)
    return is_accessible
