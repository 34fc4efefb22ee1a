"""OpenWeather transport.

Executes a prepared request URL and hands back the raw body. Failures are
logged and reported as ``None``; nothing here retries.
"""

from __future__ import annotations

import httpx

from ..logging import get_logger
from ..request import redact_url

logger = get_logger("openweather")


def _upstream_error(resp: httpx.Response) -> dict:
    try:
        data = resp.json()
    except ValueError:
        return {}
    if not isinstance(data, dict):
        return {}
    return {"code": str(data.get("cod", "")), "message": data.get("message", "OpenWeather error")}


class HttpTransport:
    def __init__(self, *, timeout_s: float, client: httpx.Client | None = None) -> None:
        self._timeout_s = timeout_s
        self._client = client

    def retrieve(self, url: str) -> str | None:
        try:
            if self._client is not None:
                resp = self._client.get(url)
            else:
                with httpx.Client(timeout=self._timeout_s) as client:
                    resp = client.get(url)
        except httpx.HTTPError as exc:
            logger.warning(
                "transport_error",
                extra={"extra": {"url": redact_url(url), "error": type(exc).__name__}},
            )
            return None

        if resp.status_code >= 400:
            logger.warning(
                "upstream_error",
                extra={"extra": {"url": redact_url(url), "status": resp.status_code, **_upstream_error(resp)}},
            )
            return None
        return resp.text
