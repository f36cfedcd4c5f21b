import asyncio

import httpx

from weatherclient.client import (
    AsyncWeatherClient, InvalidQuery, NetworkError, NotFound, Unauthorized, UpstreamError,
)
from weatherclient.config import WeatherSettings
from weatherwidget.render import CITY_NOT_FOUND, FETCH_FAILED, INVALID_API_KEY
from weatherwidget.state import Failed, Idle, Loaded, Loading
from weatherwidget.widget import WeatherWidget

from conftest import SEOUL_PAYLOAD, make_snapshot


class DummyClient:
    """Async client double: returns snapshots, or raises errors registered per city."""
    def __init__(self, errors=None):
        self.errors = errors or {}
        self.calls = []
    async def lookup(self, city):
        self.calls.append(city)
        if not city.strip():
            raise InvalidQuery("City name must not be empty")
        if city in self.errors:
            raise self.errors[city]
        return make_snapshot(name=city)


class GatedClient:
    """Lookups block until the test releases that city."""
    def __init__(self):
        self.gates = {}
        self.calls = []
    def _gate(self, city):
        return self.gates.setdefault(city, asyncio.Event())
    def release(self, city):
        self._gate(city).set()
    async def lookup(self, city):
        self.calls.append(city)
        await self._gate(city).wait()
        return make_snapshot(name=city)


def test_mount_looks_up_default_city_once():
    client = DummyClient()
    widget = WeatherWidget(client)
    async def go():
        await widget.mount()
        await widget.mount()
    asyncio.run(go())
    assert client.calls == ['Seoul']
    assert widget.state == Loaded(make_snapshot(name='Seoul'))


def test_mount_uses_configured_default():
    client = DummyClient()
    widget = WeatherWidget(client, default_city='Busan')
    asyncio.run(widget.mount())
    assert client.calls == ['Busan']


def test_blank_submit_is_a_no_op():
    client = DummyClient()
    widget = WeatherWidget(client)
    seen = []
    widget.subscribe(seen.append)
    asyncio.run(widget.submit('   '))
    assert client.calls == []
    assert widget.state == Idle()
    assert seen == []


def test_submit_trims_and_emits_loading_then_loaded():
    client = DummyClient()
    widget = WeatherWidget(client)
    seen = []
    widget.subscribe(seen.append)
    asyncio.run(widget.submit('  Tokyo '))
    assert client.calls == ['Tokyo']
    assert seen == [Loading('Tokyo'), Loaded(make_snapshot(name='Tokyo'))]


def test_each_lookup_ends_in_exactly_one_outcome():
    errors = {
        'Atlantis': NotFound('Atlantis'),
        'Locked': Unauthorized(),
        'Offline': NetworkError('down'),
        'Busy': UpstreamError('rate limited', 429),
    }
    expected = {
        'Atlantis': CITY_NOT_FOUND, 'Locked': INVALID_API_KEY, 'Offline': FETCH_FAILED,
        'Busy': '에러가 발생했습니다: rate limited',
    }
    for city, message in expected.items():
        widget = WeatherWidget(DummyClient(errors))
        seen = []
        widget.subscribe(seen.append)
        asyncio.run(widget.submit(city))
        assert seen[0] == Loading(city)
        assert len(seen) == 2
        assert isinstance(seen[1], Failed)
        assert seen[1].message == message
        assert seen[1].error is errors[city]


def test_failure_clears_previous_snapshot():
    widget = WeatherWidget(DummyClient({'Atlantis': NotFound('Atlantis')}))
    async def go():
        await widget.submit('Seoul')
        assert isinstance(widget.state, Loaded)
        await widget.submit('Atlantis')
    asyncio.run(go())
    assert isinstance(widget.state, Failed)
    assert widget.state.message == CITY_NOT_FOUND


def test_overlapping_lookups_last_resolved_wins():
    client = GatedClient()
    widget = WeatherWidget(client)
    async def go():
        first = asyncio.create_task(widget.submit('Busan'))
        second = asyncio.create_task(widget.submit('Tokyo'))
        await asyncio.sleep(0)
        assert client.calls == ['Busan', 'Tokyo']
        assert widget.state == Loading('Tokyo')
        # the later submission resolves first ...
        client.release('Tokyo')
        await second
        assert widget.state == Loaded(make_snapshot(name='Tokyo'))
        # ... and is overwritten when the earlier one lands
        client.release('Busan')
        await first
    asyncio.run(go())
    assert widget.state == Loaded(make_snapshot(name='Busan'))


def test_mount_with_blank_default_makes_no_lookup():
    client = DummyClient()
    widget = WeatherWidget(client, default_city='  ')
    seen = []
    widget.subscribe(seen.append)
    asyncio.run(widget.mount())
    assert client.calls == []
    assert widget.state == Idle()
    assert seen == []


def test_http_status_reaches_displayed_message():
    def handler(request):
        if request.url.params['q'] == 'Seoul':
            return httpx.Response(200, json=SEOUL_PAYLOAD)
        return httpx.Response(404, json={"cod": "404", "message": "city not found"})

    async def go():
        settings = WeatherSettings(api_key='secret')
        async with AsyncWeatherClient(settings, transport=httpx.MockTransport(handler)) as client:
            widget = WeatherWidget(client, default_city=settings.default_city)
            await widget.mount()
            assert widget.state == Loaded(make_snapshot(name='Seoul'))
            await widget.submit('Atlantis')
            return widget.state
    state = asyncio.run(go())
    assert isinstance(state, Failed)
    assert isinstance(state.error, NotFound)
    assert state.message == CITY_NOT_FOUND
