"""Registry of metrics exposed by the process."""
from __future__ import annotations

import abc
import io
import threading
from typing import Dict, List, MutableMapping, TextIO


class Metric(abc.ABC):
    """Anything a registry can render."""

    @abc.abstractmethod
    def write_metric(self, buf: TextIO, parent_labels: str = "") -> None:
        ...

    @abc.abstractmethod
    def add_metric(self, values: MutableMapping[str, float]) -> None:
        ...


class MetricsRegistry:
    """Thread-safe collection of registered metrics.

    Rendering copies the metric list under the registry lock and then renders
    each metric outside of it, so only one metric lock is held at a time.
    """

    def __init__(self) -> None:
        self._metrics: List[Metric] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)

    def __contains__(self, metric: object) -> bool:
        with self._lock:
            return any(existing is metric for existing in self._metrics)

    def register(self, metric: Metric) -> None:
        with self._lock:
            if not any(existing is metric for existing in self._metrics):
                self._metrics.append(metric)

    def deregister(self, metric: Metric) -> None:
        with self._lock:
            self._metrics = [existing for existing in self._metrics if existing is not metric]

    def write_metrics(self, buf: TextIO, parent_labels: str = "") -> None:
        for metric in self._copy():
            metric.write_metric(buf, parent_labels)

    def add_metrics(self, values: MutableMapping[str, float]) -> None:
        for metric in self._copy():
            metric.add_metric(values)

    def export(self, parent_labels: str = "") -> str:
        buf = io.StringIO()
        self.write_metrics(buf, parent_labels)
        return buf.getvalue()

    def snapshot(self) -> Dict[str, float]:
        values: Dict[str, float] = {}
        self.add_metrics(values)
        return values

    def _copy(self) -> List[Metric]:
        with self._lock:
            return list(self._metrics)


_default_registry: MetricsRegistry | None = None
_default_registry_lock = threading.Lock()


def default_registry() -> MetricsRegistry:
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = MetricsRegistry()
        return _default_registry
