import math

EARTH_RADIUS_M = 6371000.0

DIRECTIONS = [
    'north',
    'northeast',
    'east',
    'southeast',
    'south',
    'southwest',
    'west',
    'northwest',
]


def haversine_distance(a, b) -> float:
    """Calculate haversine distance between two GeoPoints in meters"""
    lat1_rad = math.radians(a.latitude)
    lat2_rad = math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)
    h = (math.sin(dlat/2)**2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon/2)**2)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c


def initial_bearing(a, b) -> float:
    """Initial great-circle bearing from a to b, in degrees [0, 360)"""
    lat1_rad = math.radians(a.latitude)
    lat2_rad = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)
    y = math.sin(dlon) * math.cos(lat2_rad)
    x = (math.cos(lat1_rad) * math.sin(lat2_rad) -
         math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon))
    return (math.degrees(math.atan2(y, x)) + 360) % 360


def cardinal_direction(bearing: float) -> str:
    """Nearest of the 8 compass points for a bearing in degrees"""
    # half-up rounding, round() would send 22.5 to north
    index = int(math.floor(bearing / 45 + 0.5)) % 8
    return DIRECTIONS[index]


def is_point_near_segment(point, start, end, threshold_m: float) -> bool:
    """Ellipse membership: the point's distances to both endpoints sum to less
    than the segment length plus the threshold."""
    d1 = haversine_distance(point, start)
    d2 = haversine_distance(point, end)
    segment_length = haversine_distance(start, end)
    return (d1 + d2) < (segment_length + threshold_m)
