"""Pydantic models shared by the metrics package."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MetricName(BaseModel):
    """Identity of a metric: the exposed name and its help text."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
