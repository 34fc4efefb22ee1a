"""Daily forecast parsing with fixed-length padding."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Protocol
from zoneinfo import ZoneInfo

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError

from .conditions import map_condition_code
from .logging import get_logger
from .schemas import FORECAST_DAYS, DayForecast
from .temperature import sanitize_temperature

logger = get_logger("forecast")


class DayLabeler(Protocol):
    def label(self, index: int) -> str:
        """Return the display label for forecast day ``index`` (0 = today)."""


class WeekdayLabeler:
    """Abbreviated weekday name of today + ``index`` in a timezone."""

    def __init__(self, timezone_name: str = "UTC") -> None:
        if timezone_name.upper() == "UTC":
            self._tz = timezone.utc
        else:
            self._tz = ZoneInfo(timezone_name)

    def label(self, index: int) -> str:
        day = datetime.now(self._tz).date() + timedelta(days=index)
        return day.strftime("%a")


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("expected a number, got a boolean")
    return value


def _truncate_to_int(value: Any) -> Any:
    # Fractional values truncate toward zero; numeric strings are accepted.
    value = _reject_bool(value)
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("expected a finite number")
        return int(value)
    return value


JsonFloat = Annotated[float, BeforeValidator(_reject_bool)]
JsonInt = Annotated[int, BeforeValidator(_truncate_to_int)]


class WeatherDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    main: str
    icon: str
    id: JsonInt


def first_descriptor(value: Any) -> Any:
    # Providers send a list of descriptors; only the first is meaningful.
    if not isinstance(value, list) or not value:
        raise ValueError("weather must be a non-empty list")
    return value[0]


class DailyTemperature(BaseModel):
    model_config = ConfigDict(extra="ignore")

    min: JsonFloat
    max: JsonFloat


class DailyEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temp: DailyTemperature
    weather: Annotated[WeatherDescriptor, BeforeValidator(first_descriptor)]


def parse_forecasts(days: list[Any], metric: bool, labeler: DayLabeler) -> list[DayForecast]:
    """Parse ``daily`` entries into exactly ``FORECAST_DAYS`` forecasts.

    Days past the fifth are dropped. A malformed day becomes a sentinel;
    missing days are appended as sentinels. The caller guarantees ``days``
    is non-empty.
    """
    result: list[DayForecast] = []
    for index, raw in enumerate(days[:FORECAST_DAYS]):
        try:
            entry = DailyEntry.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "invalid_forecast_day",
                extra={"extra": {"day": index, "errors": exc.error_count()}},
            )
            result.append(DayForecast.sentinel(metric))
            continue
        result.append(
            DayForecast(
                low=sanitize_temperature(entry.temp.min, metric),
                high=sanitize_temperature(entry.temp.max, metric),
                condition_text=entry.weather.main,
                condition_code=map_condition_code(entry.weather.icon, entry.weather.id),
                day_label=labeler.label(index),
                is_metric=metric,
            )
        )

    # Display clients index five days unconditionally.
    for index in range(len(result), FORECAST_DAYS):
        logger.warning("missing_forecast_day", extra={"extra": {"day": index}})
        result.append(DayForecast.sentinel(metric))
    return result
