"""Location domain data structures.

Coordinates are plain degree pairs. Permission state is kept in two forms:
the platform's detailed ``AuthorizationStatus`` and the three-way
``PermissionStatus`` the coordinator branches on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in degrees.

    Attributes:
        latitude: Degrees north, -90.0 to 90.0.
        longitude: Degrees east, -180.0 to 180.0.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude must be -90..90, got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude must be -180..180, got {self.longitude}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for wire format."""
        return {"latitude": self.latitude, "longitude": self.longitude}


# Used whenever no real location is available or permitted
FALLBACK_COORDINATE = Coordinate(latitude=37.519485, longitude=126.890398)


class PermissionStatus(Enum):
    """Location permission as seen by the coordinator."""

    UNKNOWN = "unknown"
    GRANTED = "granted"
    DENIED = "denied"


class AuthorizationStatus(Enum):
    """Detailed authorization states reported by a location platform."""

    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED_ALWAYS = "authorized_always"
    AUTHORIZED_WHEN_IN_USE = "authorized_when_in_use"

    def collapse(self) -> PermissionStatus:
        """Map the platform status onto a coordinator PermissionStatus."""
        return _COLLAPSE_MAP[self]


_COLLAPSE_MAP = {
    AuthorizationStatus.NOT_DETERMINED: PermissionStatus.UNKNOWN,
    AuthorizationStatus.RESTRICTED: PermissionStatus.DENIED,
    AuthorizationStatus.DENIED: PermissionStatus.DENIED,
    AuthorizationStatus.AUTHORIZED_ALWAYS: PermissionStatus.GRANTED,
    AuthorizationStatus.AUTHORIZED_WHEN_IN_USE: PermissionStatus.GRANTED,
}


def to_permission_status(
    status: PermissionStatus | AuthorizationStatus,
) -> PermissionStatus:
    """Normalize either status flavor to a PermissionStatus."""
    if isinstance(status, AuthorizationStatus):
        return status.collapse()
    return status
