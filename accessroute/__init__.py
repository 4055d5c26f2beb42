__title__ = 'accessroute'
__version__ = '1.0.0'
__author__ = 'AccessRoute Team'
__license__ = 'MIT'
__copyright__ = 'Copyright 2024 AccessRoute Team'

__all__ = ['core_route_service', 'knowledge_base', 'cost_functions', 'guidance', 'navigation', 'config', 'logger', 'exceptions']

# Set default logging handler to avoid "No handler found" warnings.
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
