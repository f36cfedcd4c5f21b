from __future__ import annotations
from typing import Any, Dict, Optional
import logging
import httpx

from .config import WeatherSettings
from .models import WeatherSnapshot

UNITS = 'metric'  # fixed; temperatures are always Celsius, wind m/s
UNKNOWN_ERROR_MESSAGE = 'unknown error'


class WeatherError(Exception):
    pass

class InvalidQuery(WeatherError, ValueError):
    pass

class NotFound(WeatherError):
    def __init__(self, city: str):
        super().__init__(f"City not found: {city!r}")
        self.city = city

class Unauthorized(WeatherError):
    def __init__(self):
        super().__init__("OpenWeatherMap rejected the API key (401)")

class UpstreamError(WeatherError):
    def __init__(self, upstream_message: Optional[str], status_code: Optional[int] = None):
        self.upstream_message = upstream_message
        self.status_code = status_code
        super().__init__(f"Error {status_code}: {self.message}")

    @property
    def message(self) -> str:
        return self.upstream_message or UNKNOWN_ERROR_MESSAGE

class NetworkError(WeatherError):
    pass


# ---------------- Shared request / response handling -----------------
def _normalize_city(city_name: str) -> str:
    city = (city_name or '').strip()
    if not city:
        raise InvalidQuery("City name must not be empty")
    return city

def _params(settings: WeatherSettings, city: str) -> Dict[str, str]:
    return {'q': city, 'appid': settings.api_key or '', 'units': UNITS}

def _error_message(resp: httpx.Response) -> Optional[str]:
    """Pull OpenWeatherMap's ``message`` field out of an error body, if any."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return None

def _to_snapshot(resp: httpx.Response, city: str, log: logging.Logger) -> WeatherSnapshot:
    status = resp.status_code
    if status == 404:
        log.warning("No match for city %r (404)", city)
        raise NotFound(city)
    if status == 401:
        log.error("Lookup for %r unauthorized (401); check OPENWEATHER_API_KEY", city)
        raise Unauthorized()
    if not 200 <= status < 300:
        message = _error_message(resp)
        log.error("Lookup for %r failed with %s: %s", city, status, message or resp.text[:200])
        raise UpstreamError(message, status)
    try:
        data: Dict[str, Any] = resp.json()
    except ValueError as e:
        log.error("Non-JSON response for %r: %s", city, resp.text[:200])
        raise UpstreamError("Non-JSON response", status) from e
    log.debug("Weather payload for %r: %s", city, data)
    try:
        return WeatherSnapshot.from_payload(data)
    except (KeyError, IndexError, TypeError) as e:
        log.error("Malformed weather payload for %r: %r", city, e)
        raise UpstreamError(f"Malformed weather payload ({e!r})", status) from e


class WeatherClient:
    """Blocking client for the OpenWeatherMap current-weather endpoint.

    One ``lookup`` is one GET; nothing is retried or cached.
    """

    def __init__(self, settings: WeatherSettings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self._client = httpx.Client(timeout=settings.timeout, follow_redirects=True, transport=transport)
        self._log = logging.getLogger(__name__)

    def lookup(self, city_name: str) -> WeatherSnapshot:
        """Fetch current conditions for ``city_name``.

        Raises InvalidQuery before any I/O for blank names, otherwise NotFound,
        Unauthorized, UpstreamError or NetworkError.
        """
        city = _normalize_city(city_name)
        url = f"{self.settings.base_url}/weather"
        self._log.info("Looking up weather for %r", city)
        try:
            resp = self._client.get(url, params=_params(self.settings, city))
        except httpx.RequestError as e:
            self._log.error("Network failure looking up %r: %s", city, e)
            raise NetworkError(f"Request for {city!r} failed: {e}") from e
        return _to_snapshot(resp, city, self._log)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> 'WeatherClient':
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class AsyncWeatherClient:
    """Same contract as WeatherClient, awaitable; used by the widget."""

    def __init__(self, settings: WeatherSettings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._client = httpx.AsyncClient(timeout=settings.timeout, follow_redirects=True, transport=transport)
        self._log = logging.getLogger(__name__)

    async def lookup(self, city_name: str) -> WeatherSnapshot:
        city = _normalize_city(city_name)
        url = f"{self.settings.base_url}/weather"
        self._log.info("Looking up weather for %r", city)
        try:
            resp = await self._client.get(url, params=_params(self.settings, city))
        except httpx.RequestError as e:
            self._log.error("Network failure looking up %r: %s", city, e)
            raise NetworkError(f"Request for {city!r} failed: {e}") from e
        return _to_snapshot(resp, city, self._log)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> 'AsyncWeatherClient':
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
