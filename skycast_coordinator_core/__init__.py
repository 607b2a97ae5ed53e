"""Core helpers for Skycast location and weather coordination.

Owned by the Skycast Coordinator Core team.
"""

__version__ = "0.1.0"

from .config import SkycastConfig, api_key_is_valid, load_config
from .coordinator import LocationWeatherCoordinator
from .domains import (
    FALLBACK_COORDINATE,
    AuthorizationStatus,
    Coordinate,
    PermissionStatus,
    WeatherResult,
    WeatherSnapshot,
)
from .errors import (
    SkycastClientError,
    SkycastConfigLoadError,
    SkycastConfigurationError,
    SkycastConnectionError,
    SkycastCoordinateUnavailable,
    SkycastDecodeError,
    SkycastError,
    SkycastLocationError,
    SkycastPermissionPending,
    SkycastResponseError,
    SkycastTimeout,
    SkycastTransportError,
)
from .http import OpenWeatherHttpClient
from .location import LocationObserver, LocationProvider, StaticLocationProvider
from .streams import EventStream, StreamRecorder

__all__ = [
    "FALLBACK_COORDINATE",
    "AuthorizationStatus",
    "Coordinate",
    "EventStream",
    "LocationObserver",
    "LocationProvider",
    "LocationWeatherCoordinator",
    "OpenWeatherHttpClient",
    "PermissionStatus",
    "SkycastClientError",
    "SkycastConfig",
    "SkycastConfigLoadError",
    "SkycastConfigurationError",
    "SkycastConnectionError",
    "SkycastCoordinateUnavailable",
    "SkycastDecodeError",
    "SkycastError",
    "SkycastLocationError",
    "SkycastPermissionPending",
    "SkycastResponseError",
    "SkycastTimeout",
    "SkycastTransportError",
    "StaticLocationProvider",
    "StreamRecorder",
    "WeatherResult",
    "WeatherSnapshot",
    "__version__",
    "api_key_is_valid",
    "load_config",
]
