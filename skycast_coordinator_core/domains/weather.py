"""Weather domain data structures.

A ``WeatherSnapshot`` is decoded from the OpenWeatherMap "current weather"
payload (``units=metric``):

    {"main": {"temp": 20.1, "temp_min": 18.0, "temp_max": 22.0,
              "humidity": 55},
     "wind": {"speed": 3.2}}

Every completed fetch is published as a ``WeatherResult``, success or not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import SkycastClientError, SkycastDecodeError
from .location import Coordinate


@dataclass(frozen=True, slots=True)
class WeatherSnapshot:
    """Current conditions at one point in time.

    Attributes:
        temperature: Current temperature (°C).
        temp_min: Minimum temperature currently observed (°C).
        temp_max: Maximum temperature currently observed (°C).
        humidity: Relative humidity, integer percent.
        wind_speed: Wind speed (m/s).
    """

    temperature: float
    temp_min: float
    temp_max: float
    humidity: int
    wind_speed: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for wire format."""
        return {
            "temperature": self.temperature,
            "temp_min": self.temp_min,
            "temp_max": self.temp_max,
            "humidity": self.humidity,
            "wind_speed": self.wind_speed,
        }

    @classmethod
    def from_payload(cls, payload: Any) -> WeatherSnapshot:
        """Decode an OpenWeatherMap current-weather payload.

        Args:
            payload: Parsed JSON body.

        Returns:
            WeatherSnapshot populated from the payload.

        Raises:
            SkycastDecodeError: If a required field is missing or mistyped.
        """
        main = _section(payload, "main")
        wind = _section(payload, "wind")
        return cls(
            temperature=_number(main, "main", "temp"),
            temp_min=_number(main, "main", "temp_min"),
            temp_max=_number(main, "main", "temp_max"),
            humidity=_integer(main, "main", "humidity"),
            wind_speed=_number(wind, "wind", "speed"),
        )


@dataclass(frozen=True, slots=True)
class WeatherResult:
    """Outcome of one weather fetch.

    Exactly one of ``snapshot`` and ``error`` is set.

    Attributes:
        coordinate: Coordinate the fetch was issued for.
        snapshot: Decoded weather on success.
        error: Failure cause on transport or decode failure.
    """

    coordinate: Coordinate
    snapshot: WeatherSnapshot | None = None
    error: SkycastClientError | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one outcome is present."""
        if (self.snapshot is None) == (self.error is None):
            raise ValueError("WeatherResult needs exactly one of snapshot or error")

    @classmethod
    def success(
        cls, coordinate: Coordinate, snapshot: WeatherSnapshot
    ) -> WeatherResult:
        return cls(coordinate=coordinate, snapshot=snapshot)

    @classmethod
    def failure(cls, coordinate: Coordinate, error: SkycastClientError) -> WeatherResult:
        return cls(coordinate=coordinate, error=error)

    @property
    def ok(self) -> bool:
        """True if the fetch produced a snapshot."""
        return self.snapshot is not None


def _section(payload: Any, key: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise SkycastDecodeError("Weather payload is not a JSON object")
    section = payload.get(key)
    if not isinstance(section, dict):
        raise SkycastDecodeError(f"Weather payload missing '{key}' object")
    return section


def _number(section: dict[str, Any], parent: str, key: str) -> float:
    value = section.get(key)
    # bool is an int subclass; JSON true/false is never a measurement
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SkycastDecodeError(f"Weather field '{parent}.{key}' must be a number")
    return float(value)


def _integer(section: dict[str, Any], parent: str, key: str) -> int:
    value = section.get(key)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SkycastDecodeError(f"Weather field '{parent}.{key}' must be an integer")
    return value
