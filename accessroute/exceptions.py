"""
Custom exceptions for the AccessRoute routing engine
"""

class AccessRouteError(Exception):
    """Base exception for AccessRoute routing engine"""
    pass


class NoRouteFoundError(AccessRouteError):
    """Raised when the search frontier is exhausted before reaching the destination"""
    pass


class EmptyFrontierError(AccessRouteError):
    """Raised when the lowest-cost point is requested from an empty frontier"""
    pass


class InvalidCoordinatesError(AccessRouteError):
    """Raised when coordinates are invalid or out of bounds"""
    pass


class LocationUnavailableError(AccessRouteError):
    """Raised when navigation needs the current location and none is known"""
    pass


ERROR_MESSAGES = {
    'location': 'Unable to access your location. Please check your device settings.',
    'navigation': 'Unable to calculate a route. Please try a different destination.',
    'accessibility': 'Unable to find an accessible route. Please adjust your preferences or try a different destination.',
}

DEFAULT_ERROR_MESSAGE = 'An unexpected error occurred. Please try again.'


def get_error_message(context: str) -> str:
    """User-facing text for an error raised in the given context"""
    return ERROR_MESSAGES.get(context, DEFAULT_ERROR_MESSAGE)
