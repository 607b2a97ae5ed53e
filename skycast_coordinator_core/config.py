"""Configuration loading for Skycast coordinators.

Configuration is data: a YAML file or process environment supplies the
OpenWeatherMap API key and request options. The key itself is never
hardcoded.

Example ``skycast.yaml``:

    api_key: 0123456789abcdef
    request_timeout: 10
    fallback:
      latitude: 37.519485
      longitude: 126.890398
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .domains.location import FALLBACK_COORDINATE, Coordinate
from .errors import SkycastConfigLoadError

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

ENV_API_KEY = "SKYCAST_API_KEY"
ENV_BASE_URL = "SKYCAST_BASE_URL"
ENV_REQUEST_TIMEOUT = "SKYCAST_REQUEST_TIMEOUT"

_API_KEY_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def api_key_is_valid(api_key: str | None) -> bool:
    """Check that an API key can be placed in a request URL as-is."""
    if not api_key:
        return False
    return _API_KEY_PATTERN.fullmatch(api_key) is not None


@dataclass(frozen=True)
class SkycastConfig:
    """Configuration for weather fetching.

    Attributes:
        api_key: OpenWeatherMap API key (None when not configured).
        base_url: Current-weather endpoint.
        request_timeout: Total request timeout (seconds). None keeps the
            HTTP client's default.
        fallback_coordinate: Location used when the device location is
            denied, and the initial refresh target.
    """

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float | None = None
    fallback_coordinate: Coordinate = FALLBACK_COORDINATE

    @property
    def has_valid_api_key(self) -> bool:
        """True if the configured API key is usable."""
        return api_key_is_valid(self.api_key)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SkycastConfig:
        """Build config from a parsed mapping (YAML document or similar)."""
        fallback = FALLBACK_COORDINATE
        fallback_data = data.get("fallback")
        if fallback_data:
            try:
                fallback = Coordinate(
                    latitude=float(fallback_data["latitude"]),
                    longitude=float(fallback_data["longitude"]),
                )
            except (KeyError, TypeError, ValueError) as err:
                raise SkycastConfigLoadError(
                    f"Invalid fallback coordinate: {fallback_data!r}"
                ) from err

        timeout = data.get("request_timeout")
        api_key = data.get("api_key")
        if api_key is not None and not isinstance(api_key, str):
            raise SkycastConfigLoadError(
                f"api_key must be a string, got {type(api_key).__name__}"
            )
        return cls(
            api_key=api_key,
            base_url=data.get("base_url") or DEFAULT_BASE_URL,
            request_timeout=_parse_timeout(timeout),
            fallback_coordinate=fallback,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SkycastConfig:
        """Build config from environment variables.

        Reads SKYCAST_API_KEY, SKYCAST_BASE_URL and SKYCAST_REQUEST_TIMEOUT.
        """
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get(ENV_API_KEY) or None,
            base_url=env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            request_timeout=_parse_timeout(env.get(ENV_REQUEST_TIMEOUT)),
        )


def _parse_timeout(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as err:
        raise SkycastConfigLoadError(f"Invalid request_timeout: {value!r}") from err
    if timeout <= 0:
        raise SkycastConfigLoadError(f"request_timeout must be positive, got {timeout}")
    return timeout


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file with error handling."""
    if not path.exists():
        raise SkycastConfigLoadError(f"File not found: {path}")
    with path.open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as err:
            raise SkycastConfigLoadError(f"Invalid YAML in {path}") from err
    if not isinstance(data, dict):
        raise SkycastConfigLoadError(f"Expected a mapping in {path}")
    return data


def load_config(path: Path | str) -> SkycastConfig:
    """Load Skycast configuration from a YAML file.

    Args:
        path: Path to the YAML config file.

    Returns:
        SkycastConfig built from the file.

    Raises:
        SkycastConfigLoadError: If the file is missing or malformed.
    """
    return SkycastConfig.from_mapping(_load_yaml(Path(path)))
