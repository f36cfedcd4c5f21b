from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from weatherclient.client import WeatherError
from weatherclient.models import WeatherSnapshot


@dataclass(frozen=True)
class Idle:
    """Nothing looked up yet."""

@dataclass(frozen=True)
class Loading:
    city: str

@dataclass(frozen=True)
class Loaded:
    snapshot: WeatherSnapshot

@dataclass(frozen=True)
class Failed:
    error: WeatherError
    message: str  # localized, user-facing

UiState = Union[Idle, Loading, Loaded, Failed]
