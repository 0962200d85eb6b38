"""FastAPI scrape endpoint for the default metrics registry."""
from __future__ import annotations

import structlog
from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST

from .config import get_settings, settings_dict
from .logging_utils import configure_logging
from .metrics.registry import default_registry
from .metrics.telemetry import json_safe_snapshot
from .reporting import TelemetryReporter

_logger = structlog.get_logger(__name__)

app = FastAPI(title="Gauge Metrics Endpoint")


@app.on_event("startup")
async def on_startup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.telemetry_to_log:
        reporter = TelemetryReporter(default_registry(), settings.telemetry_interval_seconds)
        await reporter.start()
        app.state.reporter = reporter
    _logger.info("metrics.server.started", settings=settings_dict())


@app.on_event("shutdown")
async def on_shutdown() -> None:
    reporter: TelemetryReporter | None = getattr(app.state, "reporter", None)
    if reporter:
        await reporter.stop()
    _logger.info("metrics.server.stopped")


@app.get("/metrics")
async def metrics() -> PlainTextResponse:
    export = default_registry().export(get_settings().parent_labels)
    return PlainTextResponse(export, media_type=CONTENT_TYPE_LATEST)


@app.get("/telemetry")
async def telemetry() -> JSONResponse:
    return JSONResponse(json_safe_snapshot(default_registry().snapshot()))
