import logging
import math
from heapq import heappush, heappop
from itertools import count
from typing import Callable, Dict, List, Optional, Tuple

from ..exceptions import EmptyFrontierError, NoRouteFoundError
from ..models.accessibility import GeoPoint
from ..utils.geo_utils import haversine_distance

# === Grid A* parameters ===
GRID_SIZE_DEG = 0.0001        # Lattice step in latitude and longitude (~11 m)
ARRIVAL_THRESHOLD_M = 5.0     # Within this distance of the goal counts as arrived

logger = logging.getLogger(__name__)

Key = Tuple[int, int]


def heuristic(point: GeoPoint, goal: GeoPoint) -> float:
    """Straight-line distance to the goal in meters"""
    return haversine_distance(point, goal)


def grid_neighbors(current: GeoPoint, grid_size: float = GRID_SIZE_DEG) -> List[GeoPoint]:
    """The 8 lattice points around current, latitude offset outermost"""
    neighbors = []
    for i in (-1, 0, 1):
        for j in (-1, 0, 1):
            if i == 0 and j == 0:
                continue
            neighbors.append(GeoPoint(current.latitude + i * grid_size,
                                      current.longitude + j * grid_size))
    return neighbors


def reconstruct_path(came_from: Dict[Key, GeoPoint], current: GeoPoint) -> List[GeoPoint]:
    path = [current]
    while current.key in came_from:
        current = came_from[current.key]
        path.append(current)
    path.reverse()
    return path


def _pop_lowest(open_heap: list, open_keys: set, f_score: Dict[Key, float]) -> GeoPoint:
    """Pop the open point with the lowest f, earliest (re)insertion first.
    Entries superseded by a better score are discarded on the way."""
    while open_heap:
        f, _, point = heappop(open_heap)
        key = point.key
        if key in open_keys and f == f_score[key]:
            open_keys.discard(key)
            return point
    raise EmptyFrontierError("No nodes in open set")


def grid_astar(start: GeoPoint, end: GeoPoint,
               cost_func: Callable[[GeoPoint, GeoPoint], float],
               is_accessible: Callable[[GeoPoint], bool],
               grid_size: float = GRID_SIZE_DEG,
               arrival_threshold_m: float = ARRIVAL_THRESHOLD_M,
               max_expansions: Optional[int] = None) -> List[GeoPoint]:
    """A* over a lazily generated lat/lon lattice rooted at start.

    Args:
        start, end: Route endpoints
        cost_func: (u, v) -> edge weight; ``math.inf`` excludes the edge
        is_accessible: point -> bool; inaccessible neighbors are never generated
        grid_size: Lattice step in degrees
        arrival_threshold_m: Search succeeds at the first point closer than this to end
        max_expansions: Optional budget on expanded points; None is unbounded

    Returns:
        Points from start to a point within the arrival threshold of end

    Raises:
        NoRouteFoundError: If the frontier is exhausted or the budget is spent
    """
    counter = count()
    start_key = start.key

    came_from: Dict[Key, GeoPoint] = {}
    g_score: Dict[Key, float] = {start_key: 0.0}
    f_score: Dict[Key, float] = {start_key: heuristic(start, end)}

    open_heap = [(f_score[start_key], next(counter), start)]
    open_keys = {start_key}
    expansions = 0

    while open_keys:
        current = _pop_lowest(open_heap, open_keys, f_score)

        if haversine_distance(current, end) < arrival_threshold_m:
            path = reconstruct_path(came_from, current)
            logger.debug(f"Grid A* arrived after {expansions} expansions, {len(path)} points")
            return path

        expansions += 1
        if max_expansions is not None and expansions > max_expansions:
            logger.warning(f"Grid A* gave up after {max_expansions} expansions")
            raise NoRouteFoundError(
                f"No accessible route found within {max_expansions} expansions"
            )

        current_g = g_score[current.key]
        for neighbor in grid_neighbors(current, grid_size):
            if not is_accessible(neighbor):
                continue
            tentative_g = current_g + cost_func(current, neighbor)
            key = neighbor.key
            if tentative_g < g_score.get(key, math.inf):
                came_from[key] = current
                g_score[key] = tentative_g
                f_score[key] = tentative_g + heuristic(neighbor, end)
                open_keys.add(key)
                heappush(open_heap, (f_score[key], next(counter), neighbor))

    logger.warning(f"Grid A* exhausted the frontier after {expansions} expansions")
    raise NoRouteFoundError("No accessible route found")
