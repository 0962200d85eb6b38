from .gauge import Gauge, GaugeValue, format_value
from .labels import INDEX_WIDTH_BITS, LabelIndex, format_labels
from .registry import Metric, MetricsRegistry, default_registry
from .telemetry import sanitize_telemetry_name

__all__ = [
    "Gauge",
    "GaugeValue",
    "format_value",
    "INDEX_WIDTH_BITS",
    "LabelIndex",
    "format_labels",
    "Metric",
    "MetricsRegistry",
    "default_registry",
    "sanitize_telemetry_name",
]
