"""Tool registry for the weather tool server."""

from __future__ import annotations

from typing import Callable

from ..schemas import ToolSpec, WeatherInput, WeatherSnapshot
from .weather import get_weather

ToolHandler = Callable[[object, object, str], object]

TOOL_SPECS: dict[str, ToolSpec] = {
    "weather": ToolSpec(
        name="weather",
        description="Get current conditions and a 5-day forecast by city or coordinates.",
        input_model=WeatherInput,
        output_model=WeatherSnapshot,
    ),
}

TOOL_HANDLERS: dict[str, ToolHandler] = {
    "weather": get_weather,
}


def get_tool_spec(name: str) -> ToolSpec | None:
    return TOOL_SPECS.get(name)


def get_tool_handler(name: str) -> ToolHandler | None:
    return TOOL_HANDLERS.get(name)


def list_tool_specs() -> list[ToolSpec]:
    return list(TOOL_SPECS.values())
