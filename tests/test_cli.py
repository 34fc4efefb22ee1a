from weather_client.cli import build_parser, format_snapshot


def test_parser_defaults():
    args = build_parser().parse_args(["London"])
    assert args.city == "London"
    assert args.imperial is False
    assert args.server_url == "http://localhost:7001"


def test_format_snapshot():
    day = {"low": 3.0, "high": 9.0, "condition_text": "Rain", "condition_code": 11, "day_label": "Mon", "is_metric": True}
    sentinel = {"low": 0, "high": 0, "condition_text": "", "condition_code": -1, "day_label": "NaN", "is_metric": True}
    data = {
        "location_key": "q=London",
        "locality": "London",
        "condition_text": "Clouds",
        "condition_code": 28,
        "temperature": 12.34,
        "humidity": 80.0,
        "wind_speed": 18.0,
        "wind_direction": 250,
        "is_metric": True,
        "forecasts": [day, sentinel, day, day, day],
        "timestamp": 0,
    }
    text = format_snapshot(data)
    assert text.splitlines()[0] == "London: Clouds 12.3°C"
    assert "  Mon  3/9°C Rain" in text
    assert "  --   n/a" in text
