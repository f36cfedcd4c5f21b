from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

# httpx logs every request URL at INFO, and the URL carries appid=<key>
QUIET_LOGGERS = ('httpx', 'httpcore')

DEFAULT_BASE_URL = 'https://api.openweathermap.org/data/2.5'
DEFAULT_ICON_HOST = 'https://openweathermap.org'
DEFAULT_CITY = 'Seoul'


@dataclass
class WeatherSettings:
    """Configuration for the OpenWeatherMap client and the widget."""
    api_key: Optional[str] = None  # not validated here; a bad key comes back as 401
    base_url: str = DEFAULT_BASE_URL
    icon_host: str = DEFAULT_ICON_HOST
    default_city: str = DEFAULT_CITY
    timeout: float = 30.0

    @staticmethod
    def from_env() -> 'WeatherSettings':
        """Create Weather settings from environment variables."""
        api_key = os.environ.get('OPENWEATHER_API_KEY') or None
        base_url = os.environ.get('OPENWEATHER_BASE_URL', DEFAULT_BASE_URL).rstrip('/')
        icon_host = os.environ.get('OPENWEATHER_ICON_HOST', DEFAULT_ICON_HOST).rstrip('/')
        default_city = os.environ.get('WEATHER_DEFAULT_CITY', '').strip() or DEFAULT_CITY
        raw_timeout = os.environ.get('WEATHER_HTTP_TIMEOUT', '30')
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ValueError(f"Malformed WEATHER_HTTP_TIMEOUT: {raw_timeout!r}") from e

        return WeatherSettings(
            api_key=api_key,
            base_url=base_url,
            icon_host=icon_host,
            default_city=default_city,
            timeout=timeout,
        )


def configure_logging(level: str | int = 'WARNING') -> None:
    """Configure root logging, keeping the HTTP transport loggers at WARNING."""
    logging.basicConfig(level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
