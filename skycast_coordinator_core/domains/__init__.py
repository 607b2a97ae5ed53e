"""Domain-specific data structures and helpers.

This package contains the location and weather value types.
"""

from .location import (
    FALLBACK_COORDINATE,
    AuthorizationStatus,
    Coordinate,
    PermissionStatus,
    to_permission_status,
)
from .weather import WeatherResult, WeatherSnapshot

__all__ = [
    "FALLBACK_COORDINATE",
    "AuthorizationStatus",
    "Coordinate",
    "PermissionStatus",
    "WeatherResult",
    "WeatherSnapshot",
    "to_permission_status",
]
