"""Command-line client for the weather tool server."""

from __future__ import annotations

import argparse
import json
import sys

import httpx


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch weather from the tool server")
    parser.add_argument("city", nargs="?", help="City name, e.g. London")
    parser.add_argument("--lat", type=float, help="Latitude")
    parser.add_argument("--lon", type=float, help="Longitude")
    parser.add_argument("--imperial", action="store_true", help="Use imperial units")
    parser.add_argument("--locale", help="Locale such as de-DE")
    parser.add_argument("--server-url", default="http://localhost:7001", help="Tool server base URL")
    parser.add_argument("--timeout", type=float, default=30.0, help="Request timeout seconds")
    parser.add_argument("--json", action="store_true", help="Print the raw tool response")
    return parser


def format_snapshot(data: dict) -> str:
    unit = "C" if data["is_metric"] else "F"
    speed = "km/h" if data["is_metric"] else "m/s"
    name = data.get("locality") or data["location_key"]
    lines = [
        f"{name}: {data['condition_text']} {data['temperature']:.1f}°{unit}",
        f"humidity {data['humidity']:.0f}%  wind {data['wind_speed']:.1f} {speed} @ {data['wind_direction']}°",
    ]
    for day in data["forecasts"]:
        if day["day_label"] == "NaN":
            lines.append("  --   n/a")
            continue
        lines.append(f"  {day['day_label']:<4} {day['low']:.0f}/{day['high']:.0f}°{unit} {day['condition_text']}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    payload: dict[str, object] = {"units": "imperial" if args.imperial else "metric"}
    if args.city:
        payload["city"] = args.city
    elif args.lat is not None and args.lon is not None:
        payload["lat"] = args.lat
        payload["lon"] = args.lon
    else:
        parser.error("provide a city or both --lat and --lon")
    if args.locale:
        payload["locale"] = args.locale

    url = f"{args.server_url}/tools/weather"

    # Avoid inheriting system proxy settings that can break localhost calls.
    try:
        with httpx.Client(timeout=args.timeout, trust_env=False) as client:
            resp = client.post(url, json=payload)
    except httpx.HTTPError as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return 1
    if resp.status_code >= 400:
        print(f"Request failed: {resp.status_code}", file=sys.stderr)
        print(resp.text, file=sys.stderr)
        return 1

    body = resp.json()
    if args.json:
        print(json.dumps(body, ensure_ascii=False, indent=2))
        return 0 if body.get("ok") else 1

    if not body.get("ok"):
        error = body.get("error") or {}
        print(f"{error.get('code', 'ERROR')}: {error.get('message', '')}", file=sys.stderr)
        return 1

    print(format_snapshot(body["data"]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
