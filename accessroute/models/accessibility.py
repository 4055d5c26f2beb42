from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

# Nanodegree resolution for search-graph identity (~0.1 mm on the ground)
COORDINATE_KEY_SCALE = 10**9


class FeatureType(str, Enum):
    RAMP = 'ramp'
    ELEVATOR = 'elevator'
    WIDE_PATHWAY = 'wide_pathway'
    REST_AREA = 'rest_area'
    WELL_LIT = 'well_lit'
    TACTILE_PAVING = 'tactile_paving'


class ObstacleType(str, Enum):
    STAIRS = 'stairs'
    CONSTRUCTION = 'construction'
    NARROW_PATH = 'narrow_path'
    POOR_LIGHTING = 'poor_lighting'
    UNEVEN_SURFACE = 'uneven_surface'


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 coordinate in degrees"""
    latitude: float
    longitude: float

    @property
    def key(self) -> Tuple[int, int]:
        """Exact-value hashable identity used by the search maps"""
        return (round(self.latitude * COORDINATE_KEY_SCALE),
                round(self.longitude * COORDINATE_KEY_SCALE))

    def to_dict(self) -> dict:
        return {'lat': self.latitude, 'lon': self.longitude}


@dataclass
class AccessibilityFeature:
    """Helpful infrastructure reported at a location"""
    type: FeatureType
    location: GeoPoint
    description: str = ''
    is_active: bool = True

    def __post_init__(self):
        self.type = FeatureType(self.type)

    def to_dict(self) -> dict:
        return {
            'type': self.type.value,
            'location': self.location.to_dict(),
            'description': self.description,
            'is_active': self.is_active,
        }


@dataclass
class AccessibilityObstacle:
    """Something that makes a location harder (or impossible) to pass"""
    type: ObstacleType
    location: GeoPoint
    description: str = ''
    temporary_until: Optional[datetime] = None

    def __post_init__(self):
        self.type = ObstacleType(self.type)

    def to_dict(self) -> dict:
        return {
            'type': self.type.value,
            'location': self.location.to_dict(),
            'description': self.description,
            'temporary_until': self.temporary_until.isoformat() if self.temporary_until else None,
        }


@dataclass
class AccessibilityPreferences:
    """Rider accessibility needs that shape the route cost"""
    requires_wheelchair_access: bool = False
    prefer_well_lit: bool = False
    needs_rest_stops: bool = False
    # Reserved: not consulted by the cost model or the accessibility check
    maximum_slope: Optional[float] = None
    minimum_path_width: Optional[float] = None


@dataclass
class NavigationState:
    """Where the rider is, where they are going and the route between"""
    current_location: Optional[GeoPoint] = None
    destination: Optional[GeoPoint] = None
    route: List[GeoPoint] = field(default_factory=list)
    is_navigating: bool = False
