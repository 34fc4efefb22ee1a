"""Weather server configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE, override=False)


class WeatherServerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OWM_WEATHER_", env_file=str(ENV_FILE), extra="ignore")

    host: str = "0.0.0.0"
    port: int = 7001

    # Round-robin pool, e.g. OPENWEATHER_API_KEYS=key1,key2
    openweather_api_keys: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        validation_alias=AliasChoices("OPENWEATHER_API_KEYS", "OWM_WEATHER_OPENWEATHER_API_KEYS"),
    )
    openweather_override_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENWEATHER_OVERRIDE_KEY", "OWM_WEATHER_OPENWEATHER_OVERRIDE_KEY"),
    )
    openweather_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENWEATHER_API_KEY", "OWM_WEATHER_OPENWEATHER_API_KEY"),
    )
    openweather_base_url: str = "https://api.openweathermap.org/data/3.0"

    request_timeout_s: float = 8.0
    locale: str = "en-US"
    default_timezone: str = "UTC"

    @field_validator("openweather_api_keys", mode="before")
    @classmethod
    def _split_keys(cls, value: object) -> object:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> WeatherServerSettings:
    return WeatherServerSettings()
