"""Labelled gauge metric."""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Mapping, MutableMapping, Optional, TextIO

import numpy as np
import structlog

from ..models import MetricName
from .labels import INDEX_WIDTH_BITS, LabelIndex, escape_help, format_labels, join_labels
from .registry import Metric, MetricsRegistry, default_registry
from .telemetry import non_finite_spelling, sanitize_telemetry_name

_logger = structlog.get_logger(__name__)


def format_value(value: float) -> str:
    """Shortest positional decimal that round-trips at 32-bit float precision."""
    # values beyond float32 range overflow to infinity
    with np.errstate(over="ignore"):
        single = np.float32(value)
    spelling = non_finite_spelling(float(single))
    if spelling is not None:
        return spelling
    return np.format_float_positional(single, unique=True, trim="-")


@dataclass
class GaugeValue:
    value: float
    labels: Dict[str, str] = field(default_factory=dict)
    formatted_labels: str = ""

    @classmethod
    def create(cls, value: float, labels: Optional[Mapping[str, str]]) -> "GaugeValue":
        frozen = dict(labels or {})
        return cls(value=value, labels=frozen, formatted_labels=format_labels(frozen))


class Gauge(Metric):
    """A value that can go up, go down or be set, partitioned by labels.

    The gauge registers itself with the default registry when created. Call
    `deregister()` before dropping it to stop it from being rendered.
    """

    def __init__(self, metric: MetricName) -> None:
        self.name = metric.name
        self.description = metric.description
        self._lock = threading.Lock()
        self._label_index = LabelIndex()
        self._values: Dict[int, GaugeValue] = {}
        self._width_warned = False
        self.register(None)

    def register(self, registry: MetricsRegistry | None = None) -> None:
        """Register with `registry`, or the default registry when it is None."""
        if registry is None:
            registry = default_registry()
        registry.register(self)

    def deregister(self, registry: MetricsRegistry | None = None) -> None:
        """Deregister from `registry`, or the default registry when it is None."""
        if registry is None:
            registry = default_registry()
        registry.deregister(self)

    def add(self, delta: float, labels: Optional[Mapping[str, str]] = None) -> None:
        """Increase the value for `labels` by `delta` (which may be negative)."""
        with self._lock:
            index = self._resolve(labels)
            entry = self._values.get(index)
            if entry is None:
                self._values[index] = GaugeValue.create(delta, labels)
            else:
                entry.value += delta

    def set(self, value: float, labels: Optional[Mapping[str, str]] = None) -> None:
        """Set the value for `labels`."""
        with self._lock:
            index = self._resolve(labels)
            entry = self._values.get(index)
            if entry is None:
                self._values[index] = GaugeValue.create(value, labels)
            else:
                entry.value = value

    def write_metric(self, buf: TextIO, parent_labels: str = "") -> None:
        with self._lock:
            if not self._values:
                return
            buf.write(f"# HELP {self.name} {escape_help(self.description)}\n")
            buf.write(f"# TYPE {self.name} gauge\n")
            for entry in self._values.values():
                labels = join_labels(parent_labels, entry.formatted_labels)
                if labels:
                    buf.write(f"{self.name}{{{labels}}} {format_value(entry.value)}\n")
                else:
                    buf.write(f"{self.name} {format_value(entry.value)}\n")

    def add_metric(self, values: MutableMapping[str, float]) -> None:
        with self._lock:
            for entry in self._values.values():
                key = self.name
                if entry.formatted_labels:
                    key = f"{self.name}:{entry.formatted_labels}"
                values[sanitize_telemetry_name(key)] = entry.value

    def _resolve(self, labels: Optional[Mapping[str, str]]) -> int:
        index = self._label_index.resolve(labels)
        if not self._width_warned and len(self._label_index) > INDEX_WIDTH_BITS:
            self._width_warned = True
            _logger.warning(
                "gauge.label_tokens_exceeded",
                metric=self.name,
                tokens=len(self._label_index),
                limit=INDEX_WIDTH_BITS,
            )
        return index

    def __repr__(self) -> str:
        return f"Gauge(name={self.name!r})"
