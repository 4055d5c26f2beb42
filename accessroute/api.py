"""
AccessRoute Routing Engine - Flask Web API Blueprint
Accessibility-aware routing for the navigation app
"""

import math
import time
from datetime import datetime
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, Field, ValidationError

from .core_route_service import AccessibilityRouteService
from .exceptions import AccessRouteError, InvalidCoordinatesError, NoRouteFoundError, get_error_message
from .logger import logger
from .models.accessibility import (
    AccessibilityFeature,
    AccessibilityObstacle,
    AccessibilityPreferences,
    FeatureType,
    GeoPoint,
    ObstacleType,
)
from .utils.geo_utils import haversine_distance

routing_bp = Blueprint('routing_bp', __name__)

SERVICE_KEY = 'accessroute.service'


# --- Request bodies ---
class Coordinates(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    def to_point(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lon)


class PreferencesRequest(BaseModel):
    requires_wheelchair_access: bool = False
    prefer_well_lit: bool = False
    needs_rest_stops: bool = False
    maximum_slope: Optional[float] = None
    minimum_path_width: Optional[float] = None

    def to_preferences(self) -> AccessibilityPreferences:
        return AccessibilityPreferences(**self.model_dump())


class RouteRequest(BaseModel):
    start: Coordinates
    end: Coordinates
    preferences: Optional[PreferencesRequest] = None


class FeatureRequest(BaseModel):
    type: FeatureType
    location: Coordinates
    description: str = ''
    is_active: bool = True


class ObstacleRequest(BaseModel):
    type: ObstacleType
    location: Coordinates
    description: str = ''
    temporary_until: Optional[datetime] = None


def get_route_service() -> AccessibilityRouteService:
    return current_app.extensions[SERVICE_KEY]


def clean_nan_values(obj):
    """Recursively clean NaN values from objects to make them JSON serializable"""
    if isinstance(obj, dict):
        return {k: clean_nan_values(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [clean_nan_values(item) for item in obj]
    elif isinstance(obj, float) and (math.isnan(obj) or math.isinf(obj)):
        return None
    else:
        return obj


def _parse(model, data):
    return model.model_validate(data or {})


@routing_bp.errorhandler(ValidationError)
def handle_validation_error(e):
    logger.warning(f"Rejected request: {e.error_count()} validation error(s)")
    return jsonify({'error': 'Invalid request', 'details': e.errors(include_url=False, include_context=False)}), 400


@routing_bp.errorhandler(InvalidCoordinatesError)
def handle_invalid_coordinates(e):
    return jsonify({'error': str(e)}), 400


@routing_bp.errorhandler(NoRouteFoundError)
def handle_no_route(e):
    return jsonify({'error': get_error_message('accessibility'), 'detail': str(e)}), 404


@routing_bp.errorhandler(AccessRouteError)
def handle_routing_error(e):
    logger.error(f"Routing error: {e}")
    return jsonify({'error': get_error_message('navigation')}), 500


@routing_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    service = current_app.extensions.get(SERVICE_KEY)
    if service is None:
        return jsonify({'status': 'error', 'message': 'Route service not initialized'}), 500

    return jsonify({
        'status': 'healthy',
        'message': 'AccessRoute Routing Engine is running',
        'features': len(service.knowledge_base.features),
        'obstacles': len(service.knowledge_base.obstacles),
        'timestamp': time.time()
    })


@routing_bp.route('/route', methods=['POST'])
def route():
    """Find an accessible route and the features along it"""
    body = _parse(RouteRequest, request.get_json(silent=True))
    service = get_route_service()
    preferences = body.preferences.to_preferences() if body.preferences else None

    path = service.find_accessible_route(body.start.to_point(), body.end.to_point(), preferences)
    features = service.features_on_route(path)
    distance_m = sum(haversine_distance(a, b) for a, b in zip(path[:-1], path[1:]))

    response: Dict[str, Any] = {
        'route': [p.to_dict() for p in path],
        'features': [f.to_dict() for f in features],
        'distance_m': distance_m,
    }
    return jsonify(clean_nan_values(response))


@routing_bp.route('/features', methods=['POST'])
def add_feature():
    body = _parse(FeatureRequest, request.get_json(silent=True))
    feature = AccessibilityFeature(body.type, body.location.to_point(), body.description, body.is_active)
    get_route_service().add_feature(feature)
    return jsonify(feature.to_dict()), 201


@routing_bp.route('/obstacles', methods=['POST'])
def add_obstacle():
    body = _parse(ObstacleRequest, request.get_json(silent=True))
    obstacle = AccessibilityObstacle(body.type, body.location.to_point(), body.description, body.temporary_until)
    get_route_service().add_obstacle(obstacle)
    return jsonify(obstacle.to_dict()), 201


@routing_bp.route('/obstacles', methods=['DELETE'])
def remove_obstacles():
    body = _parse(Coordinates, request.get_json(silent=True))
    service = get_route_service()
    before = len(service.knowledge_base.obstacles)
    service.remove_obstacles_near(body.to_point())
    return jsonify({'removed': before - len(service.knowledge_base.obstacles)})


@routing_bp.route('/preferences', methods=['PUT'])
def set_preferences():
    body = _parse(PreferencesRequest, request.get_json(silent=True))
    get_route_service().set_preferences(body.to_preferences())
    return jsonify(body.model_dump())
