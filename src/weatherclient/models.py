from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict

from .config import DEFAULT_ICON_HOST


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for one city, numerics exactly as the API sent them."""
    name: str
    temp: float
    feels_like: float
    humidity: float
    wind_speed: float
    condition: str
    description: str
    icon: str

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> 'WeatherSnapshot':
        """Build a snapshot from a ``/weather`` response body.

        Raises KeyError / IndexError / TypeError when a fixed path is missing;
        the client turns those into an UpstreamError.
        """
        main = data['main']
        weather = data['weather'][0]
        return cls(
            name=data['name'],
            temp=main['temp'],
            feels_like=main['feels_like'],
            humidity=main['humidity'],
            wind_speed=data['wind']['speed'],
            condition=weather['main'],
            description=weather['description'],
            icon=weather['icon'],
        )


def display_round(value: float) -> int:
    """Round half up (towards +inf), the way the browser's Math.round does."""
    return math.floor(value + 0.5)


def icon_url(icon: str, host: str = DEFAULT_ICON_HOST) -> str:
    return f"{host.rstrip('/')}/img/wn/{icon}@2x.png"
