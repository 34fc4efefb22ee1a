from weather_server.providers import build_provider
from weather_server.settings import WeatherServerSettings


def test_key_pool_from_env(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEYS", "a, b,,c")
    monkeypatch.setenv("OPENWEATHER_OVERRIDE_KEY", "")
    settings = WeatherServerSettings()
    assert settings.openweather_api_keys == ["a", "b", "c"]


def test_prefixed_settings(monkeypatch):
    monkeypatch.setenv("OWM_WEATHER_LOCALE", "de-DE")
    monkeypatch.setenv("OWM_WEATHER_REQUEST_TIMEOUT_S", "3.5")
    settings = WeatherServerSettings()
    assert settings.locale == "de-DE"
    assert settings.request_timeout_s == 3.5


def test_build_provider_wires_key_sources(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEYS", "a,b")
    monkeypatch.setenv("OPENWEATHER_OVERRIDE_KEY", "")
    monkeypatch.setenv("OPENWEATHER_API_KEY", "legacy")
    provider = build_provider(WeatherServerSettings())
    keys = provider.coordinator.keys
    assert keys.pool_size == 2
    assert [keys.next_key() for _ in range(3)] == ["a", "b", "a"]
