"""Terminal weather widget: shows the default city, then looks up whatever city you type.

Usage:
    python scripts/weather_widget.py

Reads OPENWEATHER_API_KEY (and the other OPENWEATHER_* / WEATHER_* settings) from the
environment or a .env file at the repo root. Type ``quit`` or send EOF to leave.
"""
from __future__ import annotations
import asyncio
import os

import logging
from dotenv import load_dotenv

from weatherclient.client import AsyncWeatherClient
from weatherclient.config import WeatherSettings, configure_logging
from weatherwidget.render import render
from weatherwidget.widget import WeatherWidget

load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))

logger = logging.getLogger("weather.widget")
configure_logging(os.environ.get("LOG_LEVEL", "WARNING"))

PROMPT = '도시 이름을 입력하세요: '
EXIT_WORDS = {'quit', 'exit'}


async def main():
    settings = WeatherSettings.from_env()
    async with AsyncWeatherClient(settings) as client:
        widget = WeatherWidget(client, default_city=settings.default_city)
        widget.subscribe(lambda state: print(render(state, settings.icon_host)))
        await widget.mount()
        loop = asyncio.get_running_loop()
        while True:
            try:
                text = await loop.run_in_executor(None, input, PROMPT)
            except EOFError:
                break
            if text.strip().lower() in EXIT_WORDS:
                break
            await widget.submit(text)
    logger.info("Widget closed")


if __name__ == "__main__":
    asyncio.run(main())
