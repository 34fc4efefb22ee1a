import json

import pytest

from weather_server.settings import get_settings
from weather_server.tools.weather import get_provider


def make_day(low=10.0, high=20.0, main="Clear", icon="01d", condition_id=800):
    return {
        "temp": {"min": low, "max": high},
        "weather": [{"main": main, "icon": icon, "id": condition_id}],
    }


def make_payload(days=None, **current):
    current_block = {
        "temp": 21.5,
        "humidity": 64,
        "wind_speed": 5.0,
        "wind_deg": 250,
        "weather": [{"main": "Clouds", "icon": "03d", "id": 802}],
    }
    current_block.update(current)
    if days is None:
        days = [make_day() for _ in range(8)]
    return json.dumps({"current": current_block, "daily": days})


class IndexLabeler:
    def label(self, index):
        return f"D{index}"


class FakeTransport:
    def __init__(self, body=None):
        self.body = body
        self.urls = []

    def retrieve(self, url):
        self.urls.append(url)
        return self.body


@pytest.fixture(autouse=True)
def _clear_cached_settings():
    get_settings.cache_clear()
    get_provider.cache_clear()
    yield
    get_settings.cache_clear()
    get_provider.cache_clear()
