"""Text rendering of the widget state.

Everything here is a pure function of its arguments; the terminal front-end
prints whatever ``render`` returns.
"""
from __future__ import annotations

from weatherclient.client import NetworkError, NotFound, Unauthorized, UpstreamError, WeatherError
from weatherclient.config import DEFAULT_ICON_HOST
from weatherclient.models import display_round, icon_url

from .state import Failed, Idle, Loaded, Loading, UiState

CITY_NOT_FOUND = '도시를 찾을 수 없습니다.'
INVALID_API_KEY = 'API 키가 유효하지 않습니다.'
UPSTREAM_ERROR = '에러가 발생했습니다: {message}'
UNKNOWN_ERROR = '알 수 없는 에러'
FETCH_FAILED = '날씨 정보를 가져오는 중 문제가 발생했습니다.'

SPINNER = '... 불러오는 중'


def message_for(error: WeatherError) -> str:
    """Map an error kind to its fixed user-facing message."""
    if isinstance(error, NotFound):
        return CITY_NOT_FOUND
    if isinstance(error, Unauthorized):
        return INVALID_API_KEY
    if isinstance(error, UpstreamError):
        return UPSTREAM_ERROR.format(message=error.upstream_message or UNKNOWN_ERROR)
    if isinstance(error, NetworkError):
        return FETCH_FAILED
    raise TypeError(f"No user-facing message for {type(error).__name__}")


def render_card(state: Loaded, icon_host: str = DEFAULT_ICON_HOST) -> str:
    s = state.snapshot
    lines = [
        s.name,
        f"[{s.description}] {icon_url(s.icon, icon_host)}",
        f"{display_round(s.temp)}°C",
        s.condition,
        f"체감 온도: {display_round(s.feels_like)}°C",
        f"습도: {s.humidity}%",
        f"풍속: {s.wind_speed} m/s",
    ]
    return '\n'.join(lines)


def render(state: UiState, icon_host: str = DEFAULT_ICON_HOST) -> str:
    if isinstance(state, Loading):
        return SPINNER
    if isinstance(state, Failed):
        return state.message
    if isinstance(state, Loaded):
        return render_card(state, icon_host)
    if isinstance(state, Idle):
        return ''
    raise TypeError(f"Unknown UI state: {state!r}")
