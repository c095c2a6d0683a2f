import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def delivery_bed():
    from delivery.domain import delivery

    bed = DomainFixture(delivery)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(delivery_bed):
    with delivery_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _adapters():
    """Start every test with fresh fake adapters."""
    from delivery.geo import reset_geo_client
    from delivery.publisher import reset_event_sink

    reset_geo_client()
    reset_event_sink()
    yield
    reset_geo_client()
    reset_event_sink()
