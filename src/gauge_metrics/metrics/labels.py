"""Label encoding helpers for labelled metrics."""
from __future__ import annotations

from typing import Dict, Mapping, Tuple

# Number of distinct label tokens whose weights fit a signed 64-bit index.
# Weights are Python ints and keep widening past this, so indices never collide;
# crossing it only means the label cardinality of a metric is unusually high.
INDEX_WIDTH_BITS = 62

LabelToken = Tuple[str, str]


class LabelIndex:
    """Assigns every distinct label pair its own power-of-two weight.

    The composite index of a label set is the sum of its pair weights, so it is
    independent of iteration order and unique per label set. Not thread-safe:
    callers hold the owning metric's lock.
    """

    def __init__(self) -> None:
        self._weights: Dict[LabelToken, int] = {}

    def __len__(self) -> int:
        return len(self._weights)

    def resolve(self, labels: Mapping[str, str] | None) -> int:
        if not labels:
            return 0
        index = 0
        for key, value in labels.items():
            token = (key, value)
            weight = self._weights.get(token)
            if weight is None:
                weight = 1 << len(self._weights)
                self._weights[token] = weight
            index += weight
        return index


def escape_help(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def escape_label_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def format_labels(labels: Mapping[str, str] | None) -> str:
    """Render labels as `key="value"` pairs joined by commas."""
    if not labels:
        return ""
    return ",".join(f'{key}="{escape_label_value(value)}"' for key, value in labels.items())


def join_labels(parent_labels: str, labels: str) -> str:
    if parent_labels and labels:
        return f"{parent_labels},{labels}"
    return parent_labels or labels
