"""HTTP client for the OpenWeatherMap current-weather endpoint."""

from __future__ import annotations

from typing import Any

import aiohttp

from .config import SkycastConfig
from .domains.location import Coordinate
from .domains.weather import WeatherSnapshot
from .errors import (
    SkycastConfigurationError,
    SkycastConnectionError,
    SkycastDecodeError,
    SkycastResponseError,
    SkycastTimeout,
)

# WeatherSnapshot fields are Celsius and m/s
UNITS = "metric"


class OpenWeatherHttpClient:
    """HTTP client wrapper for OpenWeatherMap current weather."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: SkycastConfig,
    ) -> None:
        self._session = session
        self._config = config

    @property
    def config(self) -> SkycastConfig:
        return self._config

    def _params(self, coordinate: Coordinate) -> dict[str, str]:
        return {
            "lat": str(coordinate.latitude),
            "lon": str(coordinate.longitude),
            "appid": self._config.api_key or "",
            "units": UNITS,
        }

    def _request_kwargs(self, coordinate: Coordinate) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"params": self._params(coordinate)}
        # Only override the session default when explicitly configured
        if self._config.request_timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(
                total=self._config.request_timeout
            )
        return kwargs

    async def fetch_weather(self, coordinate: Coordinate) -> WeatherSnapshot:
        """Fetch current weather for a coordinate.

        This is the only fetch operation; every trigger funnels into it.

        Args:
            coordinate: Location to query.

        Returns:
            Decoded WeatherSnapshot.

        Raises:
            SkycastConfigurationError: If the API key is missing or malformed.
                No request is issued in this case.
            SkycastResponseError: If the service returns a non-200 status.
            SkycastDecodeError: If the body is not the expected JSON.
            SkycastTimeout: If the request times out.
            SkycastConnectionError: If the network request fails.
        """
        if not self._config.has_valid_api_key:
            raise SkycastConfigurationError("Weather API key missing or malformed")

        try:
            async with self._session.get(
                self._config.base_url,
                **self._request_kwargs(coordinate),
            ) as resp:
                if resp.status != 200:
                    raise SkycastResponseError(
                        resp.status,
                        f"Weather request failed with status {resp.status}",
                    )
                try:
                    payload = await resp.json(content_type=None)
                except ValueError as err:
                    raise SkycastDecodeError("Weather response is not valid JSON") from err
        except TimeoutError as err:
            raise SkycastTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            raise SkycastConnectionError("Weather request failed") from err

        return WeatherSnapshot.from_payload(payload)
