import math

import pytest

from gauge_metrics.metrics import sanitize_telemetry_name
from gauge_metrics.metrics.telemetry import json_safe_snapshot


@pytest.mark.parametrize(
    "name, expected",
    [
        ("algod_peers", "algod_peers"),
        ('algod_peers:dir="in"', "algod_peers_dir__in_"),
        ("1st_round", "_st_round"),
        ("ledger.round-time", "ledger_round-time"),
        ('net:host="a",dir="out"', "net_host__a__dir__out_"),
    ],
)
def test_sanitize_telemetry_name(name, expected):
    assert sanitize_telemetry_name(name) == expected


def test_json_safe_snapshot_spells_non_finite_values():
    snapshot = {"a": 1.5, "b": math.inf, "c": -math.inf, "d": math.nan}
    assert json_safe_snapshot(snapshot) == {"a": 1.5, "b": "+Inf", "c": "-Inf", "d": "NaN"}
    assert math.isnan(snapshot["d"])
