"""OpenWeatherMap One Call provider."""

from __future__ import annotations

from ..forecast import DayLabeler, WeekdayLabeler
from ..logging import get_logger
from ..parser import parse_response
from ..request import RequestCoordinator, coordinates_selector, redact_url
from ..schemas import WeatherSnapshot
from .base import LocalityResolver, QueryLocalityResolver, Transport

logger = get_logger("openweathermap")


class OpenWeatherMapProvider:
    def __init__(
        self,
        coordinator: RequestCoordinator,
        transport: Transport,
        *,
        locale: str = "en-US",
        labeler: DayLabeler | None = None,
        locality_resolver: LocalityResolver | None = None,
    ) -> None:
        self._coordinator = coordinator
        self._transport = transport
        self._locale = locale
        self._labeler = labeler or WeekdayLabeler()
        self._locality_resolver = locality_resolver or QueryLocalityResolver()

    @property
    def coordinator(self) -> RequestCoordinator:
        return self._coordinator

    def get_by_location_id(
        self, selector: str, metric: bool, *, locale: str | None = None
    ) -> WeatherSnapshot | None:
        return self._handle_request(selector, metric, locale or self._locale)

    def get_by_coordinates(
        self, lat: float, lon: float, metric: bool, *, locale: str | None = None
    ) -> WeatherSnapshot | None:
        return self._handle_request(coordinates_selector(lat, lon), metric, locale or self._locale)

    def should_retry(self) -> bool:
        return False

    def _handle_request(self, selector: str, metric: bool, locale: str) -> WeatherSnapshot | None:
        request = self._coordinator.build(selector, metric, locale)
        if request is None:
            return None

        logger.info("weather_request", extra={"extra": {"url": redact_url(request.url)}})
        body = self._transport.retrieve(request.url)
        if body is None:
            return None
        logger.debug("weather_response", extra={"extra": {"selector": selector, "body": body}})

        result = parse_response(
            body,
            selector=selector,
            metric=metric,
            labeler=self._labeler,
            locality=self._locality_resolver.resolve(selector),
        )
        if not result.ok:
            logger.warning(
                "malformed_weather_data",
                extra={
                    "extra": {
                        "selector": selector,
                        "lang": request.lang,
                        "reason": result.failure.reason if result.failure else None,
                    }
                },
            )
            return None

        snapshot = result.snapshot
        logger.info(
            "weather_updated",
            extra={
                "extra": {
                    "selector": selector,
                    "condition_code": snapshot.condition_code,
                    "temperature": snapshot.temperature,
                }
            },
        )
        return snapshot
