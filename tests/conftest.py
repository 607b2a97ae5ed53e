"""Pytest configuration and fixtures for skycast_coordinator_core tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from skycast_coordinator_core import (
    Coordinate,
    OpenWeatherHttpClient,
    SkycastConfig,
)

SAMPLE_PAYLOAD: dict[str, Any] = {
    "coord": {"lon": 126.8904, "lat": 37.5195},
    "main": {"temp": 20.1, "temp_min": 18.0, "temp_max": 22.0, "humidity": 55},
    "wind": {"speed": 3.2, "deg": 250},
    "name": "Yeongdeungpo",
}

DEVICE_COORDINATE = Coordinate(latitude=37.5665, longitude=126.978)


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def config() -> SkycastConfig:
    """Config with a well-formed API key."""
    return SkycastConfig(api_key="test-key-123")


@pytest.fixture
def client(mock_session: MagicMock, config: SkycastConfig) -> OpenWeatherHttpClient:
    """Weather client bound to the mock session."""
    return OpenWeatherHttpClient(session=mock_session, config=config)


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception to raise from json() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_error is not None:
        response.json.side_effect = json_error
    elif json_data is not None:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
