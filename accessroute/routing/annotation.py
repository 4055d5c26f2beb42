from typing import List

from ..knowledge_base import SEGMENT_THRESHOLD_M
from ..models.accessibility import AccessibilityFeature, GeoPoint
from ..utils.geo_utils import haversine_distance


def features_on_route(route: List[GeoPoint], knowledge_base,
                      threshold_m: float = SEGMENT_THRESHOLD_M) -> List[AccessibilityFeature]:
    """Active features near any segment of the route, one per location,
    nearest to the route's first point first."""
    if len(route) < 2:
        return []

    seen = set()
    relevant = []
    for start, end in zip(route[:-1], route[1:]):
        for feature in knowledge_base.features_near_segment(start, end, threshold_m):
            if not feature.is_active or feature.location.key in seen:
                continue
            seen.add(feature.location.key)
            relevant.append(feature)

    origin = route[0]
    relevant.sort(key=lambda f: haversine_distance(origin, f.location))
    return relevant
