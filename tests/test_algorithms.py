import math
from heapq import heappush

import pytest

from accessroute.cost_functions import make_accessibility_check, make_cost_function
from accessroute.exceptions import EmptyFrontierError, NoRouteFoundError
from accessroute.knowledge_base import AccessibilityKnowledgeBase
from accessroute.models.accessibility import (
    AccessibilityObstacle,
    AccessibilityPreferences,
    GeoPoint,
    ObstacleType,
)
from accessroute.routing.algorithms import (
    _pop_lowest,
    grid_astar,
    grid_neighbors,
    reconstruct_path,
)
from accessroute.utils.geo_utils import haversine_distance

ORIGIN = GeoPoint(0.0, 0.0)
# ~33 m east of the origin at the equator
EAST_33M = GeoPoint(0.0, 0.0003)


def _search(start, end, preferences, kb, **kwargs):
    return grid_astar(
        start, end,
        cost_func=make_cost_function(preferences, kb),
        is_accessible=make_accessibility_check(preferences, kb),
        **kwargs
    )


def _length(route):
    return sum(haversine_distance(a, b) for a, b in zip(route[:-1], route[1:]))


def test_grid_neighbors():
    neighbors = grid_neighbors(ORIGIN)
    assert len(neighbors) == 8
    assert ORIGIN not in neighbors
    assert len({n.key for n in neighbors}) == 8
    assert neighbors[0] == GeoPoint(-0.0001, -0.0001)
    assert neighbors[-1] == GeoPoint(0.0001, 0.0001)


def test_reconstruct_path_follows_back_pointers():
    a, b, c = GeoPoint(0, 0), GeoPoint(0, 1), GeoPoint(0, 2)
    came_from = {b.key: a, c.key: b}
    assert reconstruct_path(came_from, c) == [a, b, c]
    assert reconstruct_path({}, a) == [a]


def test_pop_lowest_on_empty_frontier():
    with pytest.raises(EmptyFrontierError):
        _pop_lowest([], {ORIGIN.key}, {})


def test_pop_lowest_skips_stale_entries():
    far, near = GeoPoint(1, 1), GeoPoint(2, 2)
    heap = []
    heappush(heap, (5.0, 0, far))
    heappush(heap, (7.0, 1, near))
    heappush(heap, (3.0, 2, far))
    # far was improved to 3.0, near was later improved to 4.0
    f_score = {far.key: 3.0, near.key: 4.0}
    heappush(heap, (4.0, 3, near))
    open_keys = {far.key, near.key}

    assert _pop_lowest(heap, open_keys, f_score) == far
    assert _pop_lowest(heap, open_keys, f_score) == near
    with pytest.raises(EmptyFrontierError):
        _pop_lowest(heap, open_keys, f_score)


def test_ties_go_to_earliest_entry():
    first, second = GeoPoint(1, 1), GeoPoint(2, 2)
    heap = []
    heappush(heap, (1.0, 0, first))
    heappush(heap, (1.0, 1, second))
    assert _pop_lowest(heap, {first.key, second.key}, {first.key: 1.0, second.key: 1.0}) == first


def test_straight_route_without_obstacles():
    route = _search(ORIGIN, EAST_33M, AccessibilityPreferences(), AccessibilityKnowledgeBase())

    assert route[0] == ORIGIN
    assert haversine_distance(route[-1], EAST_33M) < 5
    distances = [haversine_distance(p, EAST_33M) for p in route]
    assert all(later < earlier for earlier, later in zip(distances, distances[1:]))
    assert len(route) == 4


def test_start_within_arrival_threshold():
    nearby = GeoPoint(0, 0.00001)
    assert _search(ORIGIN, nearby, AccessibilityPreferences(), AccessibilityKnowledgeBase()) == [ORIGIN]


def test_search_is_deterministic():
    kb = AccessibilityKnowledgeBase()
    end = GeoPoint(0.0004, 0.0004)
    first = _search(ORIGIN, end, AccessibilityPreferences(), kb)
    second = _search(ORIGIN, end, AccessibilityPreferences(), kb)
    assert first == second


def test_detour_around_stairs(wheelchair):
    end = GeoPoint(0, 0.0006)
    stairs = GeoPoint(0, 0.0003)
    kb = AccessibilityKnowledgeBase(obstacles=[AccessibilityObstacle(ObstacleType.STAIRS, stairs)])

    direct = _search(ORIGIN, end, AccessibilityPreferences(), kb)
    detour = _search(ORIGIN, end, wheelchair, kb, max_expansions=5000)

    assert detour[0] == ORIGIN
    assert haversine_distance(detour[-1], end) < 5
    assert all(haversine_distance(p, stairs) >= 20 for p in detour[1:])
    assert _length(detour) > _length(direct)


def test_enclosed_start_exhausts_frontier(wheelchair):
    kb = AccessibilityKnowledgeBase(obstacles=[AccessibilityObstacle(ObstacleType.STAIRS, ORIGIN)])
    with pytest.raises(NoRouteFoundError):
        _search(ORIGIN, EAST_33M, wheelchair, kb)


def test_unreachable_destination_spends_budget(wheelchair):
    kb = AccessibilityKnowledgeBase(
        obstacles=[AccessibilityObstacle(ObstacleType.STAIRS, GeoPoint(0, 0.00015))]
    )
    with pytest.raises(NoRouteFoundError, match="500 expansions"):
        _search(ORIGIN, EAST_33M, wheelchair, kb, max_expansions=500)


def test_infinite_edges_are_never_taken():
    calls = []

    def cost_func(u, v):
        calls.append((u, v))
        # Only eastward moves along the equator are passable
        if v.latitude == 0 and v.longitude > u.longitude:
            return haversine_distance(u, v)
        return math.inf

    route = grid_astar(ORIGIN, EAST_33M, cost_func, lambda p: True)
    assert all(p.latitude == 0 for p in route)
    assert calls
