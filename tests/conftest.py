import pytest
from prometheus_client import CollectorRegistry

from costscope.dataset import Dataset
from costscope.metrics import LoadMetrics
from costscope.models import UsageRecord


@pytest.fixture()
def registry() -> "CollectorRegistry":
    """
    fresh Prometheus registry to avoid cross-test state.
    """
    return CollectorRegistry()


@pytest.fixture()
def metrics(registry: "CollectorRegistry") -> "LoadMetrics":
    return LoadMetrics(registry=registry)


@pytest.fixture()
def two_record_dataset() -> "Dataset":
    return Dataset.build(
        [
            UsageRecord(resource_group="A", cost=5.0, consumed_quantity=1.0),
            UsageRecord(resource_group="B", cost=9.5, consumed_quantity=2.0),
        ],
        applications=["Macao", "Fadel"],
        resources=["Microsoft.Compute", "Microsoft.Storage"],
    )
