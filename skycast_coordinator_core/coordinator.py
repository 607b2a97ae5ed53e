"""Location and weather coordinator.

This module turns permission-gated location requests into weather fetches
and republishes the results as event streams. It handles:
- Permission branching (unknown / granted / denied)
- Coordinate resolution with a fixed fallback
- The refresh target (last resolved coordinate)
- Publishing fetch results, success or failure

Inputs arrive as ``locate``, ``refresh`` and ``permission_changed``. Each
has a fire-and-forget form that spawns a task on the running event loop.

Note: ``locate`` under an undetermined permission only asks the platform.
It does not continue on its own once permission is granted; the flow
resumes when the platform reports the change through
``permission_changed``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from .domains.location import (
    AuthorizationStatus,
    Coordinate,
    PermissionStatus,
    to_permission_status,
)
from .domains.weather import WeatherResult
from .errors import (
    SkycastClientError,
    SkycastConfigurationError,
    SkycastCoordinateUnavailable,
    SkycastLocationError,
    SkycastPermissionPending,
)
from .http import OpenWeatherHttpClient
from .location import LocationProvider
from .streams import EventStream

_LOGGER = logging.getLogger(__name__)


class LocationWeatherCoordinator:
    """Coordinates permission, device location and weather fetches.

    Usage:
        coordinator = LocationWeatherCoordinator(provider, client)
        coordinator.weather_result.subscribe(my_weather_handler)
        coordinator.start()
        coordinator.trigger_locate()
        ...
        coordinator.stop()
        await coordinator.wait_idle()

    All state lives on the event loop thread. ``last_resolved_coordinate``
    is only written by ``_remember_coordinate``.
    """

    def __init__(
        self,
        provider: LocationProvider,
        client: OpenWeatherHttpClient,
        *,
        fallback_coordinate: Coordinate | None = None,
    ) -> None:
        """Initialize coordinator.

        Args:
            provider: Permission and location capability
            client: Weather HTTP client
            fallback_coordinate: Overrides the configured fallback location
        """
        self._provider = provider
        self._client = client
        if fallback_coordinate is None:
            fallback_coordinate = client.config.fallback_coordinate
        self._fallback_coordinate = fallback_coordinate

        self._last_resolved_coordinate = self._fallback_coordinate
        self._tasks: set[asyncio.Task[None]] = set()
        self._started = False

        # Outputs
        self.resolved_coordinate: EventStream[Coordinate] = EventStream(
            "resolved_coordinate"
        )
        self.permission_echo: EventStream[PermissionStatus | AuthorizationStatus] = (
            EventStream("permission_echo")
        )
        self.weather_result: EventStream[WeatherResult] = EventStream(
            "weather_result"
        )

    # -------------------------------------------------------------------------
    # Public API: Lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Subscribe to provider notifications."""
        if self._started:
            return
        self._provider.add_observer(self)
        self._started = True

    def stop(self) -> None:
        """Unsubscribe from provider notifications.

        In-flight fetches are not cancelled; use ``wait_idle`` to await them.
        """
        if not self._started:
            return
        self._provider.remove_observer(self)
        self._started = False

    async def wait_idle(self) -> None:
        """Wait until every spawned trigger has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    @property
    def last_resolved_coordinate(self) -> Coordinate:
        """Refresh target: the most recently resolved coordinate."""
        return self._last_resolved_coordinate

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    # -------------------------------------------------------------------------
    # Public API: Inputs
    # -------------------------------------------------------------------------

    async def locate(self) -> None:
        """Handle a "locate me" request."""
        if not self._provider.services_enabled():
            _LOGGER.warning("Location services disabled, locate request dropped")
            return

        try:
            coordinate = self._resolve_for_locate()
        except SkycastLocationError as err:
            _LOGGER.debug("Locate request dropped: %s", err)
            return

        self._publish_coordinate(coordinate)
        await self._fetch_and_publish(coordinate)

    async def refresh(self) -> None:
        """Fetch weather again for the last resolved coordinate."""
        await self._fetch_and_publish(self._last_resolved_coordinate)

    async def permission_changed(
        self, status: PermissionStatus | AuthorizationStatus
    ) -> None:
        """Handle a permission status change reported by the platform."""
        try:
            coordinate = self._resolve_for_status(to_permission_status(status))
        except SkycastLocationError as err:
            _LOGGER.debug("Permission change %s resolved nothing: %s", status, err)
            coordinate = None

        if coordinate is not None:
            self._publish_coordinate(coordinate)

        self.permission_echo.emit(status)

        if coordinate is not None:
            await self._fetch_and_publish(coordinate)

    def trigger_locate(self) -> asyncio.Task[None]:
        """Fire-and-forget variant of ``locate``."""
        return self._spawn(self.locate())

    def trigger_refresh(self) -> asyncio.Task[None]:
        """Fire-and-forget variant of ``refresh``."""
        return self._spawn(self.refresh())

    # -------------------------------------------------------------------------
    # LocationObserver
    # -------------------------------------------------------------------------

    def on_status_changed(self, status: PermissionStatus | AuthorizationStatus) -> None:
        """Provider callback: schedule permission change handling."""
        self._spawn(self.permission_changed(status))

    def on_location_update(self, coordinate: Coordinate) -> None:
        """Provider callback: location is read on demand, so only log."""
        _LOGGER.debug(
            "Location update %.6f, %.6f", coordinate.latitude, coordinate.longitude
        )

    # -------------------------------------------------------------------------
    # Internal: Resolution
    # -------------------------------------------------------------------------

    def _resolve_for_locate(self) -> Coordinate:
        status = to_permission_status(self._provider.permission_status())

        if status is PermissionStatus.UNKNOWN:
            _LOGGER.info("Location permission undetermined, requesting")
            self._provider.request_permission()
            raise SkycastPermissionPending("Waiting for permission decision")

        if status is PermissionStatus.GRANTED:
            self._provider.start_updating()

        return self._resolve_for_status(status)

    def _resolve_for_status(self, status: PermissionStatus) -> Coordinate:
        if status is PermissionStatus.GRANTED:
            coordinate = self._provider.current_coordinate()
            if coordinate is None:
                raise SkycastCoordinateUnavailable("Device coordinate not available")
            return coordinate

        if status is PermissionStatus.DENIED:
            return self._fallback_coordinate

        raise SkycastPermissionPending(f"No coordinate for status {status.value}")

    def _publish_coordinate(self, coordinate: Coordinate) -> None:
        self.resolved_coordinate.emit(coordinate)
        self._remember_coordinate(coordinate)

    def _remember_coordinate(self, coordinate: Coordinate) -> None:
        """Sole writer of the refresh target."""
        self._last_resolved_coordinate = coordinate

    # -------------------------------------------------------------------------
    # Internal: Fetch dispatch
    # -------------------------------------------------------------------------

    async def _fetch_and_publish(self, coordinate: Coordinate) -> None:
        try:
            snapshot = await self._client.fetch_weather(coordinate)
        except SkycastConfigurationError as err:
            _LOGGER.debug("Weather fetch not attempted: %s", err)
            return
        except SkycastClientError as err:
            _LOGGER.warning(
                "Weather fetch failed for %.6f, %.6f: %s",
                coordinate.latitude,
                coordinate.longitude,
                err,
            )
            self.weather_result.emit(WeatherResult.failure(coordinate, err))
            return

        self.weather_result.emit(WeatherResult.success(coordinate, snapshot))

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(_log_task_failure)
        return task


def _log_task_failure(task: asyncio.Task[None]) -> None:
    if task.cancelled():
        return
    err = task.exception()
    if err is not None:
        _LOGGER.error(
            "Coordinator task %s failed: %s",
            task.get_name(),
            err,
            exc_info=err,
        )
