"""Weather providers.

Providers share transport, locality and day-label helpers by composition;
``build_provider`` wires the OpenWeatherMap provider from settings.
"""

from __future__ import annotations

from ..adapters.openweather import HttpTransport
from ..forecast import WeekdayLabeler
from ..keys import KeyRing
from ..request import RequestCoordinator
from ..settings import WeatherServerSettings
from .base import LocalityResolver, QueryLocalityResolver, Transport, WeatherProvider
from .openweathermap import OpenWeatherMapProvider


def build_provider(settings: WeatherServerSettings, transport: Transport | None = None) -> OpenWeatherMapProvider:
    keys = KeyRing(
        settings.openweather_api_keys,
        override_key=settings.openweather_override_key,
        legacy_key=settings.openweather_api_key,
    )
    coordinator = RequestCoordinator(keys, base_url=settings.openweather_base_url)
    return OpenWeatherMapProvider(
        coordinator,
        transport or HttpTransport(timeout_s=settings.request_timeout_s),
        locale=settings.locale,
        labeler=WeekdayLabeler(settings.default_timezone),
    )


__all__ = [
    "LocalityResolver",
    "OpenWeatherMapProvider",
    "QueryLocalityResolver",
    "Transport",
    "WeatherProvider",
    "build_provider",
]
