from flask import Flask
from flask_cors import CORS

from accessroute.api import SERVICE_KEY, routing_bp
from accessroute.config import config
from accessroute.core_route_service import AccessibilityRouteService
from accessroute.logger import logger


def create_app(route_service=None):
    """Build the Flask app around a route service (one from config by default)"""
    app = Flask(__name__)
    CORS(app)

    if route_service is None:
        config.validate()
        route_service = AccessibilityRouteService.from_config(config)
        logger.info("Accessibility route service initialized successfully")
    app.extensions[SERVICE_KEY] = route_service

    # Register Blueprints
    app.register_blueprint(routing_bp, url_prefix='/routing')

    @app.route('/')
    def index():
        return "AccessRoute backend is running!"

    return app


if __name__ == '__main__':
    api_config = config.get_api_config()
    print(f"\n🚀 AccessRoute backend running at: http://{api_config['host']}:{api_config['port']}\n")
    create_app().run(**api_config)
