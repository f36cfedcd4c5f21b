from __future__ import annotations
from typing import Callable, List
import logging

from weatherclient.client import WeatherError
from weatherclient.config import DEFAULT_CITY

from .render import message_for
from .state import Failed, Idle, Loaded, Loading, UiState

Listener = Callable[[UiState], None]


class WeatherWidget:
    """
    Holds the single UiState slot and drives lookups through an async client.
    Each transition replaces the state wholesale. Overlapping lookups are not
    coordinated: whichever resolves last sets the state.
    """

    def __init__(self, client, default_city: str = DEFAULT_CITY):
        self.client = client  # anything with ``async lookup(city) -> WeatherSnapshot``
        self.default_city = default_city
        self.state: UiState = Idle()
        self._mounted = False
        self._listeners: List[Listener] = []
        self._log = logging.getLogger(__name__)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _set_state(self, state: UiState) -> None:
        self.state = state
        for listener in self._listeners:
            listener(state)

    async def mount(self) -> None:
        """Show the default city once; later calls are no-ops."""
        if self._mounted:
            return
        self._mounted = True
        await self.submit(self.default_city)

    async def submit(self, text: str) -> None:
        """Look up ``text``; blank input leaves the state and the client untouched."""
        city = (text or '').strip()
        if not city:
            self._log.debug("Ignoring blank city")
            return
        await self._lookup(city)

    async def _lookup(self, city: str) -> None:
        self._set_state(Loading(city))
        try:
            snapshot = await self.client.lookup(city)
        except WeatherError as e:
            self._log.warning("Lookup for %r failed: %s", city, e)
            self._set_state(Failed(e, message_for(e)))
            return
        self._set_state(Loaded(snapshot))
