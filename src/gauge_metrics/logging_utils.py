from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

import structlog


def _utc_timestamp(_: Any, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def configure_logging(level: str | int = "INFO") -> None:
    """Route structlog through stdlib logging as JSON lines.

    Telemetry snapshots are logged as `telemetry.metrics` events, so the JSON
    renderer keeps the snapshot mapping intact under the `metrics` key.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format="%(message)s")
    # uvicorn logs every scrape request at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            _utc_timestamp,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
