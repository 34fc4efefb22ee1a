"""FastAPI app exposing the weather tools.

Every call returns a ``ToolResponse`` envelope; failures never surface as
HTTP 500s.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from pydantic import ValidationError

from .adapters import AdapterError
from .logging import get_logger
from .schemas import ToolError, ToolMeta, ToolResponse
from .settings import get_settings
from .tools import get_tool_handler, get_tool_spec, list_tool_specs

logger = get_logger("weather_server")

SOURCE = "openweathermap"

app = FastAPI(title="OpenWeatherMap Tool Server", version="0.1.0")


@app.on_event("startup")
def log_startup_config() -> None:
    settings = get_settings()
    logger.info(
        "tool_server_config",
        extra={
            "extra": {
                "pool_keys": len(settings.openweather_api_keys),
                "override_key_set": bool(settings.openweather_override_key),
                "legacy_key_set": bool(settings.openweather_api_key),
                "locale": settings.locale,
            }
        },
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/tools")
def list_tools() -> list[dict[str, Any]]:
    return [
        {
            "name": spec.name,
            "description": spec.description,
            "input_schema": spec.input_model.model_json_schema(),
            "output_schema": spec.output_model.model_json_schema(),
        }
        for spec in list_tool_specs()
    ]


def _error_response(event: str, error: ToolError, tool_name: str, trace_id: str, start: float) -> ToolResponse:
    latency_ms = int((time.time() - start) * 1000)
    logger.info(
        event,
        extra={
            "extra": {
                "trace_id": trace_id,
                "tool": tool_name,
                "latency_ms": latency_ms,
                "ok": False,
                "error_code": error.code,
            }
        },
    )
    return ToolResponse(
        ok=False,
        data=None,
        error=error,
        meta=ToolMeta(tool_name=tool_name, trace_id=trace_id, latency_ms=latency_ms, source=SOURCE),
    )


@app.post("/tools/{tool_name}")
async def call_tool(tool_name: str, request: Request) -> ToolResponse:
    trace_id = request.headers.get("x-trace-id") or str(uuid.uuid4())
    start = time.time()
    settings = get_settings()

    spec = get_tool_spec(tool_name)
    handler = get_tool_handler(tool_name)
    if not spec or not handler:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}")

    try:
        payload = await request.json()
        input_obj = spec.input_model.model_validate(payload)
        result = handler(input_obj, settings, trace_id)
    except ValidationError as exc:
        error = ToolError(code="INVALID_ARGUMENT", message=str(exc))
        return _error_response("tool_validation_error", error, tool_name, trace_id, start)
    except AdapterError as exc:
        error = ToolError(code=exc.code, message=exc.message, details=exc.details)
        return _error_response("tool_adapter_error", error, tool_name, trace_id, start)
    except Exception as exc:  # noqa: BLE001
        error = ToolError(code="TOOL_ERROR", message=str(exc))
        return _error_response("tool_error", error, tool_name, trace_id, start)

    latency_ms = int((time.time() - start) * 1000)
    logger.info(
        "tool_call",
        extra={
            "extra": {
                "trace_id": trace_id,
                "tool": tool_name,
                "latency_ms": latency_ms,
                "ok": True,
            }
        },
    )
    return ToolResponse(
        ok=True,
        data=result.model_dump(),
        error=None,
        meta=ToolMeta(tool_name=tool_name, trace_id=trace_id, latency_ms=latency_ms, source=SOURCE),
    )


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "weather_server.server:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
