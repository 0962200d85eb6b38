"""Periodic telemetry snapshots written to the structured log."""
from __future__ import annotations

import asyncio
import contextlib
from typing import Dict

import structlog

from .metrics.registry import MetricsRegistry, default_registry
from .metrics.telemetry import json_safe_snapshot

_logger = structlog.get_logger(__name__)


class TelemetryReporter:
    """Flattens a registry into a snapshot and emits it as a log event."""

    def __init__(self, registry: MetricsRegistry | None = None, interval_seconds: float = 60.0) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.interval_seconds = interval_seconds
        self._running = False
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._running

    def report_once(self) -> Dict[str, float]:
        snapshot = self.registry.snapshot()
        if snapshot:
            _logger.info("telemetry.metrics", metrics=json_safe_snapshot(snapshot))
        return snapshot

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self._run_loop())

    async def stop(self) -> None:
        self._running = False
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    async def _run_loop(self) -> None:
        while self._running:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.report_once()
            except Exception as exc:  # pragma: no cover - logging path
                _logger.exception("telemetry.report_failed", error=str(exc))
