"""Temperature scale correction."""

from __future__ import annotations

# Hotter than any ambient reading in deg C or deg F, colder than any in Kelvin.
KELVIN_THRESHOLD = 170.0


def sanitize_temperature(value: float, metric: bool) -> float:
    """Convert a stray Kelvin reading to the requested unit.

    OpenWeatherMap occasionally answers in Kelvin even when ``units`` asks for
    metric or imperial. Values at or below ``KELVIN_THRESHOLD`` pass through.
    """
    value = float(value)
    if value > KELVIN_THRESHOLD:
        value -= 273.15
        if not metric:
            value = value * 1.8 + 32
    return value
