"""
OpenWeatherMap client for current weather conditions.
Looks up a city by name and returns a display-ready WeatherSnapshot.
"""

__all__ = [
    'WeatherClient', 'AsyncWeatherClient', 'WeatherSettings', 'WeatherSnapshot',
    'WeatherError', 'InvalidQuery', 'NotFound', 'Unauthorized', 'UpstreamError', 'NetworkError',
    'display_round', 'icon_url',
]

from .client import (
    AsyncWeatherClient, InvalidQuery, NetworkError, NotFound, Unauthorized,
    UpstreamError, WeatherClient, WeatherError,
)
from .config import WeatherSettings
from .models import WeatherSnapshot, display_round, icon_url
