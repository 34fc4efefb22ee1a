from conftest import FakeTransport, IndexLabeler, make_payload
from fastapi.testclient import TestClient

from weather_server import server
from weather_server.keys import KeyRing
from weather_server.providers import OpenWeatherMapProvider
from weather_server.request import RequestCoordinator
from weather_server.tools import weather as weather_tool


def install_provider(monkeypatch, body, keys=("k0",)):
    transport = FakeTransport(body)
    provider = OpenWeatherMapProvider(
        RequestCoordinator(KeyRing(keys), base_url="https://api.example.test/data/3.0"),
        transport,
        labeler=IndexLabeler(),
    )
    monkeypatch.setattr(weather_tool, "get_provider", lambda: provider)
    return transport


def test_health():
    client = TestClient(server.app)
    assert client.get("/health").json() == {"status": "ok"}


def test_list_tools():
    client = TestClient(server.app)
    names = [tool["name"] for tool in client.get("/tools").json()]
    assert names == ["weather"]


def test_weather_by_city(monkeypatch):
    transport = install_provider(monkeypatch, make_payload())
    client = TestClient(server.app)
    resp = client.post("/tools/weather", json={"city": "New York", "units": "imperial"}, headers={"x-trace-id": "t-1"})

    body = resp.json()
    assert body["ok"] is True
    assert body["meta"]["trace_id"] == "t-1"
    assert body["meta"]["source"] == "openweathermap"
    assert body["data"]["location_key"] == "q=New+York"
    assert body["data"]["locality"] == "New York"
    assert len(body["data"]["forecasts"]) == 5
    assert "units=imperial" in transport.urls[0]


def test_weather_by_coordinates(monkeypatch):
    install_provider(monkeypatch, make_payload())
    client = TestClient(server.app)
    resp = client.post("/tools/weather", json={"lat": 1.0, "lon": 2.0})
    assert resp.json()["data"]["location_key"] == "lat=1.000000&lon=2.000000"


def test_no_result_is_error_envelope(monkeypatch):
    install_provider(monkeypatch, make_payload(), keys=())
    client = TestClient(server.app)
    body = client.post("/tools/weather", json={"city": "Oslo"}).json()
    assert body["ok"] is False
    assert body["error"]["code"] == "NO_RESULT"


def test_invalid_argument():
    client = TestClient(server.app)
    body = client.post("/tools/weather", json={"units": "metric"}).json()
    assert body["ok"] is False
    assert body["error"]["code"] == "INVALID_ARGUMENT"


def test_unknown_tool():
    client = TestClient(server.app)
    assert client.post("/tools/nope", json={}).status_code == 404
