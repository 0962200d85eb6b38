"""Helpers for flattening metrics into telemetry snapshots."""
from __future__ import annotations

import math
import re
from typing import Dict, Mapping, Union

_UNSAFE_TELEMETRY_CHARS = re.compile(r"(^[^a-zA-Z_]|[^a-zA-Z0-9_-])")


def sanitize_telemetry_name(name: str) -> str:
    """Replace characters the event reporter does not accept in keys with `_`."""
    return _UNSAFE_TELEMETRY_CHARS.sub("_", name)


def non_finite_spelling(value: float) -> str | None:
    """Exposition spelling of NaN and the infinities, None for finite values."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return None


def json_safe_snapshot(values: Mapping[str, float]) -> Dict[str, Union[float, str]]:
    """Copy of a snapshot that strict JSON encoders accept.

    Non-finite values are replaced by their exposition spellings.
    """
    safe: Dict[str, Union[float, str]] = {}
    for key, value in values.items():
        spelling = non_finite_spelling(value)
        safe[key] = value if spelling is None else spelling
    return safe
