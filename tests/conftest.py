import pytest

from gauge_metrics.config import get_settings
from gauge_metrics.metrics import Gauge
from gauge_metrics.models import MetricName


@pytest.fixture
def make_gauge():
    created: list[Gauge] = []

    def factory(name: str = "algod_peers", description: str = "connected peers") -> Gauge:
        gauge = Gauge(MetricName(name=name, description=description))
        created.append(gauge)
        return gauge

    yield factory
    for gauge in created:
        gauge.deregister()


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
