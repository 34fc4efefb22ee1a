"""Weather tool."""

from __future__ import annotations

from functools import lru_cache
from urllib.parse import quote_plus

from ..adapters import AdapterError
from ..providers import OpenWeatherMapProvider, build_provider
from ..schemas import WeatherInput, WeatherSnapshot
from ..settings import WeatherServerSettings, get_settings


@lru_cache(maxsize=1)
def get_provider() -> OpenWeatherMapProvider:
    # One provider per process so key rotation spans all calls.
    return build_provider(get_settings())


def get_weather(payload: WeatherInput, settings: WeatherServerSettings, _trace_id: str) -> WeatherSnapshot:
    provider = get_provider()
    metric = payload.units == "metric"
    locale = payload.locale or settings.locale

    if payload.city and payload.city.strip():
        selector = f"q={quote_plus(payload.city.strip())}"
        snapshot = provider.get_by_location_id(selector, metric, locale=locale)
    else:
        selector = None
        snapshot = provider.get_by_coordinates(payload.lat, payload.lon, metric, locale=locale)

    if snapshot is None:
        details = {"selector": selector} if selector else {"lat": payload.lat, "lon": payload.lon}
        raise AdapterError("NO_RESULT", "No weather data available", details)
    return snapshot
