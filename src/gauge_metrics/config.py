"""Configuration utilities for the metrics endpoint."""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field


ENV_FILES = [
    Path.cwd() / ".env.metrics",
    Path.cwd() / ".env.local",
]


def load_env() -> None:
    """Load .env files in priority order."""
    for env_file in ENV_FILES:
        if env_file.exists():
            load_dotenv(env_file, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in {"0", "false", "no", "off"}


class MetricsSettings(BaseModel):
    """Runtime configuration for the metrics endpoint and telemetry reporter."""

    host: str = Field(default_factory=lambda: os.getenv("METRICS_HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("METRICS_PORT", "9100")))
    # prepended to every exposed series, e.g. `host="node-1"`
    parent_labels: str = Field(default_factory=lambda: os.getenv("METRICS_PARENT_LABELS", ""))
    telemetry_to_log: bool = Field(default_factory=lambda: _env_flag("TELEMETRY_TO_LOG", "true"))
    telemetry_interval_seconds: float = Field(
        default_factory=lambda: float(os.getenv("TELEMETRY_INTERVAL_SECONDS", "60"))
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@lru_cache(maxsize=1)
def get_settings() -> MetricsSettings:
    """Return cached metrics settings."""
    load_env()
    return MetricsSettings()


def settings_dict() -> dict[str, Any]:
    """Convenience helper for exporting settings to logs."""
    return get_settings().model_dump()
