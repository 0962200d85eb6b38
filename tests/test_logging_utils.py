import json
import logging

import structlog

from gauge_metrics.logging_utils import configure_logging


def test_configure_logging_emits_json(caplog):
    caplog.set_level(logging.INFO)
    configure_logging("info")
    try:
        structlog.get_logger("gauge_metrics.test").info("telemetry.metrics", metrics={"algod_peers": 7})
    finally:
        structlog.reset_defaults()

    record = json.loads(caplog.records[-1].getMessage())
    assert record["event"] == "telemetry.metrics"
    assert record["metrics"] == {"algod_peers": 7}
    assert record["level"] == "info"
    assert record["logger"] == "gauge_metrics.test"
    assert record["timestamp"].endswith("+00:00")
