"""Tests for the location platform boundary."""

from __future__ import annotations

from skycast_coordinator_core.domains.location import (
    AuthorizationStatus,
    Coordinate,
    PermissionStatus,
)
from skycast_coordinator_core.location import StaticLocationProvider


class _RecordingObserver:
    def __init__(self) -> None:
        self.statuses: list[PermissionStatus | AuthorizationStatus] = []
        self.locations: list[Coordinate] = []

    def on_status_changed(self, status: PermissionStatus | AuthorizationStatus) -> None:
        self.statuses.append(status)

    def on_location_update(self, coordinate: Coordinate) -> None:
        self.locations.append(coordinate)


class TestStaticLocationProvider:
    """Tests for StaticLocationProvider."""

    def test_defaults(self) -> None:
        provider = StaticLocationProvider()
        assert provider.permission_status() is PermissionStatus.UNKNOWN
        assert provider.current_coordinate() is None
        assert provider.services_enabled()
        assert not provider.is_updating

    def test_set_status_notifies_observers(self) -> None:
        provider = StaticLocationProvider()
        observer = _RecordingObserver()
        provider.add_observer(observer)

        provider.set_status(AuthorizationStatus.AUTHORIZED_ALWAYS)

        assert provider.permission_status() is AuthorizationStatus.AUTHORIZED_ALWAYS
        assert observer.statuses == [AuthorizationStatus.AUTHORIZED_ALWAYS]

    def test_observer_registered_once(self) -> None:
        provider = StaticLocationProvider()
        observer = _RecordingObserver()
        provider.add_observer(observer)
        provider.add_observer(observer)

        provider.set_status(PermissionStatus.DENIED)

        assert observer.statuses == [PermissionStatus.DENIED]

    def test_removed_observer_not_notified(self) -> None:
        provider = StaticLocationProvider()
        observer = _RecordingObserver()
        provider.add_observer(observer)
        provider.remove_observer(observer)
        provider.remove_observer(observer)

        provider.set_status(PermissionStatus.DENIED)

        assert observer.statuses == []

    def test_request_permission_without_answer(self) -> None:
        provider = StaticLocationProvider()
        observer = _RecordingObserver()
        provider.add_observer(observer)

        provider.request_permission()

        assert provider.permission_requests == 1
        assert provider.permission_status() is PermissionStatus.UNKNOWN
        assert observer.statuses == []

    def test_request_permission_with_prompt_answer(self) -> None:
        provider = StaticLocationProvider(prompt_answer=PermissionStatus.GRANTED)
        observer = _RecordingObserver()
        provider.add_observer(observer)

        provider.request_permission()

        assert provider.permission_status() is PermissionStatus.GRANTED
        assert observer.statuses == [PermissionStatus.GRANTED]

    def test_location_updates_only_while_updating(self) -> None:
        provider = StaticLocationProvider(PermissionStatus.GRANTED)
        observer = _RecordingObserver()
        provider.add_observer(observer)

        provider.set_coordinate(Coordinate(1.0, 2.0))
        assert observer.locations == []

        provider.start_updating()
        provider.set_coordinate(Coordinate(3.0, 4.0))
        provider.set_coordinate(None)

        assert provider.update_starts == 1
        assert observer.locations == [Coordinate(3.0, 4.0)]
        assert provider.current_coordinate() is None
