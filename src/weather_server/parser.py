"""One Call response parsing.

The current-conditions block is all or nothing: any structural defect turns
the whole response into a ``ParseFailure``. Forecast days are validated one by
one and degrade to sentinels (see ``forecast.parse_forecasts``).
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from .conditions import map_condition_code
from .forecast import DayLabeler, JsonFloat, JsonInt, WeatherDescriptor, first_descriptor, parse_forecasts
from .schemas import WeatherSnapshot
from .temperature import sanitize_temperature

# m/s -> km/h
MPS_TO_KMH = 3.6


class CurrentConditions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    weather: Annotated[WeatherDescriptor, BeforeValidator(first_descriptor)]
    temp: JsonFloat
    humidity: JsonFloat
    wind_speed: JsonFloat
    wind_deg: JsonInt = 0


class OneCallPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    current: CurrentConditions
    daily: list[Any] = Field(min_length=1)


@dataclass(frozen=True)
class ParseFailure:
    reason: str


@dataclass(frozen=True)
class ParseResult:
    snapshot: WeatherSnapshot | None = None
    failure: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.snapshot is not None


def convert_wind_speed(speed: float, metric: bool) -> float:
    # Imperial keeps the provider value as-is.
    return speed * MPS_TO_KMH if metric else speed


def parse_response(
    raw: str | bytes,
    *,
    selector: str,
    metric: bool,
    labeler: DayLabeler,
    locality: str | None = None,
) -> ParseResult:
    try:
        payload = OneCallPayload.model_validate_json(raw)
    except ValidationError as exc:
        return ParseResult(failure=ParseFailure(_describe(exc)))

    current = payload.current
    forecasts = parse_forecasts(payload.daily, metric, labeler)
    snapshot = WeatherSnapshot(
        location_key=selector,
        locality=locality,
        condition_text=current.weather.main,
        condition_code=map_condition_code(current.weather.icon, current.weather.id),
        temperature=sanitize_temperature(current.temp, metric),
        humidity=current.humidity,
        wind_speed=convert_wind_speed(current.wind_speed, metric),
        wind_direction=current.wind_deg,
        is_metric=metric,
        forecasts=tuple(forecasts),
        timestamp=int(time.time() * 1000),
    )
    return ParseResult(snapshot=snapshot)


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"
