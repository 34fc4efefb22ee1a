"""Shared schemas (single source of truth).

Snapshot models are what providers return; tool models wrap them for the
HTTP surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

FORECAST_DAYS = 5
SENTINEL_DAY_LABEL = "NaN"


class DayForecast(BaseModel):
    """One forecast day. Sentinel days carry ``day_label == "NaN"``."""
    model_config = ConfigDict(frozen=True)

    low: float
    high: float
    condition_text: str
    condition_code: int
    day_label: str
    is_metric: bool

    @classmethod
    def sentinel(cls, metric: bool) -> "DayForecast":
        return cls(
            low=0.0,
            high=0.0,
            condition_text="",
            condition_code=-1,
            day_label=SENTINEL_DAY_LABEL,
            is_metric=metric,
        )

    @property
    def is_sentinel(self) -> bool:
        return self.day_label == SENTINEL_DAY_LABEL


class WeatherSnapshot(BaseModel):
    """One normalized observation plus a fixed-length forecast."""
    model_config = ConfigDict(frozen=True)

    location_key: str
    locality: str | None = None
    condition_text: str
    condition_code: int
    temperature: float
    humidity: float
    wind_speed: float
    wind_direction: int = 0
    is_metric: bool
    forecasts: tuple[DayForecast, ...]
    timestamp: int = Field(description="Creation time, epoch milliseconds")

    @field_validator("forecasts")
    @classmethod
    def _validate_forecast_length(cls, value: tuple[DayForecast, ...]) -> tuple[DayForecast, ...]:
        if len(value) != FORECAST_DAYS:
            raise ValueError(f"forecasts must hold exactly {FORECAST_DAYS} days")
        return value


class ToolError(BaseModel):
    """Normalized error payload returned by tools."""
    code: str
    message: str
    details: dict[str, Any] | None = None


class ToolMeta(BaseModel):
    """Metadata attached to tool responses for observability."""
    tool_name: str
    trace_id: str
    latency_ms: int | None = None
    source: str | None = None


class ToolResponse(BaseModel):
    """Unified response wrapper for all tools."""
    ok: bool
    data: Any | None = None
    error: ToolError | None = None
    meta: ToolMeta


class WeatherInput(BaseModel):
    """Input for weather tool."""
    city: str | None = Field(default=None, description="City name, e.g. London")
    lat: float | None = Field(default=None, description="Latitude")
    lon: float | None = Field(default=None, description="Longitude")
    units: Literal["metric", "imperial"] = "metric"
    locale: str | None = Field(default=None, description="Locale such as de-DE; defaults to the server locale")

    @model_validator(mode="after")
    def _validate_location(self) -> "WeatherInput":
        has_city = bool(self.city and self.city.strip())
        has_coords = self.lat is not None and self.lon is not None
        if not (has_city or has_coords):
            raise ValueError("Provide either city or (lat, lon).")
        return self


@dataclass(frozen=True)
class ToolSpec:
    """Tool registry metadata used by the tool server."""
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
