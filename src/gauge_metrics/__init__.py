"""Labelled gauge metrics with text exposition and telemetry snapshots."""
from __future__ import annotations

from .metrics import Gauge, MetricsRegistry, default_registry, sanitize_telemetry_name
from .models import MetricName

__all__ = ["Gauge", "MetricName", "MetricsRegistry", "default_registry", "sanitize_telemetry_name"]
