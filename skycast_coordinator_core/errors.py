"""Error types for Skycast location and weather coordination.

Owned by the Skycast Coordinator Core team.
"""

from __future__ import annotations


class SkycastError(Exception):
    """Base error for all Skycast failures."""


class SkycastClientError(SkycastError):
    """Base error for weather fetch failures."""


class SkycastTransportError(SkycastClientError):
    """The weather request did not produce a usable HTTP response."""


class SkycastTimeout(SkycastTransportError):
    """Timeout while communicating with the weather service."""


class SkycastConnectionError(SkycastTransportError):
    """Network connection to the weather service failed."""


class SkycastResponseError(SkycastTransportError):
    """HTTP response error from the weather service."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class SkycastDecodeError(SkycastClientError):
    """Weather payload could not be decoded."""


class SkycastConfigurationError(SkycastClientError):
    """API key is missing or malformed; no request was attempted."""


class SkycastLocationError(SkycastError):
    """Base error for location resolution failures."""


class SkycastPermissionPending(SkycastLocationError):
    """Location permission has been requested but not yet answered."""


class SkycastCoordinateUnavailable(SkycastLocationError):
    """Permission is granted but the device has no coordinate yet."""


class SkycastConfigLoadError(SkycastError):
    """Configuration file could not be loaded."""
