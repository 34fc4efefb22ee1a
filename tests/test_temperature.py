import pytest

from weather_server.temperature import sanitize_temperature


def test_kelvin_converted_to_celsius():
    assert sanitize_temperature(200, metric=True) == pytest.approx(200 - 273.15)


def test_kelvin_converted_to_fahrenheit():
    assert sanitize_temperature(200, metric=False) == pytest.approx((200 - 273.15) * 1.8 + 32)


def test_plausible_values_pass_through():
    assert sanitize_temperature(20, metric=True) == 20
    assert sanitize_temperature(-40, metric=False) == -40
    assert sanitize_temperature(170, metric=False) == 170


def test_result_is_float():
    assert isinstance(sanitize_temperature(20, metric=True), float)
