"""Tests for location domain data structures."""

from __future__ import annotations

import pytest

from skycast_coordinator_core.domains.location import (
    FALLBACK_COORDINATE,
    AuthorizationStatus,
    Coordinate,
    PermissionStatus,
    to_permission_status,
)


class TestCoordinate:
    """Tests for Coordinate value type."""

    def test_fallback_value(self) -> None:
        assert FALLBACK_COORDINATE.latitude == 37.519485
        assert FALLBACK_COORDINATE.longitude == 126.890398

    def test_value_equality(self) -> None:
        assert Coordinate(1.5, 2.5) == Coordinate(latitude=1.5, longitude=2.5)
        assert hash(Coordinate(1.5, 2.5)) == hash(Coordinate(1.5, 2.5))

    @pytest.mark.parametrize(
        ("latitude", "longitude"),
        [(90.1, 0.0), (-90.1, 0.0), (0.0, 180.1), (0.0, -180.1)],
    )
    def test_out_of_range_rejected(self, latitude: float, longitude: float) -> None:
        with pytest.raises(ValueError):
            Coordinate(latitude=latitude, longitude=longitude)

    def test_bounds_accepted(self) -> None:
        Coordinate(latitude=90.0, longitude=-180.0)
        Coordinate(latitude=-90.0, longitude=180.0)

    def test_to_dict(self) -> None:
        assert Coordinate(1.0, 2.0).to_dict() == {"latitude": 1.0, "longitude": 2.0}


class TestAuthorizationStatusCollapse:
    """Platform statuses collapse onto three coordinator states."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (AuthorizationStatus.NOT_DETERMINED, PermissionStatus.UNKNOWN),
            (AuthorizationStatus.AUTHORIZED_WHEN_IN_USE, PermissionStatus.GRANTED),
            (AuthorizationStatus.AUTHORIZED_ALWAYS, PermissionStatus.GRANTED),
            (AuthorizationStatus.DENIED, PermissionStatus.DENIED),
            (AuthorizationStatus.RESTRICTED, PermissionStatus.DENIED),
        ],
    )
    def test_collapse(
        self, status: AuthorizationStatus, expected: PermissionStatus
    ) -> None:
        assert status.collapse() is expected
        assert to_permission_status(status) is expected

    def test_every_status_is_mapped(self) -> None:
        for status in AuthorizationStatus:
            assert isinstance(status.collapse(), PermissionStatus)

    def test_permission_status_passes_through(self) -> None:
        for status in PermissionStatus:
            assert to_permission_status(status) is status
