"""Request coordination: key selection and URL construction."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .keys import KeyRing
from .language import resolve_language
from .logging import get_logger
from .schemas import FORECAST_DAYS

logger = get_logger("request")

ONECALL_PATH = "/onecall"
COORDINATES_SELECTOR = "lat={lat:f}&lon={lon:f}"

_APPID_RE = re.compile(r"(appid=)[^&]*")


def coordinates_selector(lat: float, lon: float) -> str:
    return COORDINATES_SELECTOR.format(lat=lat, lon=lon)


def redact_url(url: str) -> str:
    return _APPID_RE.sub(r"\1***", url)


@dataclass(frozen=True)
class WeatherRequest:
    selector: str
    units: str
    lang: str
    url: str

    @property
    def metric(self) -> bool:
        return self.units == "metric"


class RequestCoordinator:
    def __init__(self, keys: KeyRing, *, base_url: str) -> None:
        self._keys = keys
        self._base_url = base_url.rstrip("/")

    @property
    def keys(self) -> KeyRing:
        return self._keys

    def build(self, selector: str, metric: bool, locale: str | None) -> WeatherRequest | None:
        """Return a fully parameterized request, or ``None`` when no key is configured."""
        api_key = self._keys.next_key()
        if not api_key:
            logger.warning("no_api_key", extra={"extra": {"selector": selector}})
            return None

        units = "metric" if metric else "imperial"
        lang = resolve_language(locale)
        url = (
            f"{self._base_url}{ONECALL_PATH}?{selector}&mode=json"
            f"&units={units}&lang={lang}&cnt={FORECAST_DAYS}&appid={api_key}"
        )
        return WeatherRequest(selector=selector, units=units, lang=lang, url=url)
