import os
import sys

import pytest

# Make the src/ packages importable without installing
SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from weatherclient.models import WeatherSnapshot  # noqa: E402


SEOUL_PAYLOAD = {
    "coord": {"lon": 126.9778, "lat": 37.5683},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "main": {"temp": 21.47, "feels_like": 20.5, "temp_min": 19.7, "temp_max": 22.8, "pressure": 1019, "humidity": 43},
    "wind": {"speed": 3.09, "deg": 250},
    "name": "Seoul",
    "cod": 200,
}


@pytest.fixture
def seoul_payload():
    return SEOUL_PAYLOAD


def make_snapshot(name='Seoul', temp=21.47):
    return WeatherSnapshot(
        name=name, temp=temp, feels_like=20.5, humidity=43, wind_speed=3.09,
        condition='Clear', description='clear sky', icon='01d',
    )
