"""Location platform boundary.

The coordinator never talks to a concrete platform location API. It depends
on the ``LocationProvider`` capability and receives notifications through the
``LocationObserver`` protocol. Platform adapters translate their native
authorization and location callbacks into these canonical calls.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from .domains.location import (
    AuthorizationStatus,
    Coordinate,
    PermissionStatus,
)

_LOGGER = logging.getLogger(__name__)


class LocationObserver(Protocol):
    """Receiver of platform permission and location notifications."""

    def on_status_changed(
        self, status: PermissionStatus | AuthorizationStatus
    ) -> None:
        """Permission status changed.

        Args:
            status: The new status, as reported by the platform.
        """
        ...

    def on_location_update(self, coordinate: Coordinate) -> None:
        """Device location changed while updates are running."""
        ...


class LocationProvider(ABC):
    """Abstract capability for permission and device location.

    Implementations own ALL platform-specific concerns: prompting the user,
    accuracy settings, and delivering notifications on the event loop.
    """

    def __init__(self) -> None:
        self._observers: list[LocationObserver] = []

    @abstractmethod
    def permission_status(self) -> PermissionStatus | AuthorizationStatus:
        """Get the current permission status."""

    @abstractmethod
    def request_permission(self) -> None:
        """Ask the platform for location permission.

        Must not block. The answer arrives later via ``on_status_changed``.
        """

    @abstractmethod
    def current_coordinate(self) -> Coordinate | None:
        """Get the last known device coordinate, or None if unavailable."""

    @abstractmethod
    def start_updating(self) -> None:
        """Begin continuous location tracking (fire-and-forget)."""

    def services_enabled(self) -> bool:
        """Check whether device location services are switched on."""
        return True

    def add_observer(self, observer: LocationObserver) -> None:
        """Register an observer for status and location notifications."""
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: LocationObserver) -> None:
        """Unregister an observer. Unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify_status(self, status: PermissionStatus | AuthorizationStatus) -> None:
        for observer in list(self._observers):
            observer.on_status_changed(status)

    def _notify_location(self, coordinate: Coordinate) -> None:
        for observer in list(self._observers):
            observer.on_location_update(coordinate)


class StaticLocationProvider(LocationProvider):
    """In-memory provider for tests, demos and headless hosts.

    Status and coordinate are set explicitly. ``request_permission`` can
    simulate the user's answer to the platform prompt via ``prompt_answer``.
    """

    def __init__(
        self,
        status: PermissionStatus | AuthorizationStatus = PermissionStatus.UNKNOWN,
        coordinate: Coordinate | None = None,
        *,
        prompt_answer: PermissionStatus | AuthorizationStatus | None = None,
        services_enabled: bool = True,
    ) -> None:
        super().__init__()
        self._status = status
        self._coordinate = coordinate
        self._prompt_answer = prompt_answer
        self._services_enabled = services_enabled
        self._updating = False
        self.permission_requests = 0
        self.update_starts = 0

    def permission_status(self) -> PermissionStatus | AuthorizationStatus:
        return self._status

    def request_permission(self) -> None:
        self.permission_requests += 1
        _LOGGER.debug("Permission requested (prompt answer: %s)", self._prompt_answer)
        if self._prompt_answer is not None:
            self.set_status(self._prompt_answer)

    def current_coordinate(self) -> Coordinate | None:
        return self._coordinate

    def start_updating(self) -> None:
        self.update_starts += 1
        self._updating = True

    def services_enabled(self) -> bool:
        return self._services_enabled

    @property
    def is_updating(self) -> bool:
        return self._updating

    def set_status(self, status: PermissionStatus | AuthorizationStatus) -> None:
        """Change the permission status and notify observers."""
        self._status = status
        self._notify_status(status)

    def set_coordinate(self, coordinate: Coordinate | None) -> None:
        """Change the device coordinate.

        Observers are notified only while updates are running and the
        coordinate is known.
        """
        self._coordinate = coordinate
        if coordinate is not None and self._updating:
            self._notify_location(coordinate)

    def set_services_enabled(self, enabled: bool) -> None:
        self._services_enabled = enabled
