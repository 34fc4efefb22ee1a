from __future__ import annotations

from typing import Protocol
from urllib.parse import parse_qs

from ..schemas import WeatherSnapshot


class WeatherProvider(Protocol):
    def get_by_location_id(
        self, selector: str, metric: bool, *, locale: str | None = None
    ) -> WeatherSnapshot | None:
        """Fetch a snapshot for a free-form selector such as ``q=London``."""

    def get_by_coordinates(
        self, lat: float, lon: float, metric: bool, *, locale: str | None = None
    ) -> WeatherSnapshot | None:
        """Fetch a snapshot for a coordinate pair."""

    def should_retry(self) -> bool:
        """Whether callers should retry a failed fetch."""


class Transport(Protocol):
    def retrieve(self, url: str) -> str | None:
        """Return the response body, or ``None`` on any transport failure."""


class LocalityResolver(Protocol):
    def resolve(self, selector: str) -> str | None:
        """Return a human-readable place name for ``selector`` if known."""


class QueryLocalityResolver:
    """Use the ``q=`` part of a selector as the locality name."""

    def resolve(self, selector: str) -> str | None:
        values = parse_qs(selector).get("q")
        if not values:
            return None
        return values[0]
