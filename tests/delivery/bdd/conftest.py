"""Shared BDD fixtures and step definitions for the Delivery domain."""

import pytest
from delivery.shared.errors import DeliveryError
from pytest_bdd import parsers, then


@pytest.fixture()
def error():
    """Container for captured delivery errors."""
    return {"exc": None}


@pytest.fixture()
def couriers():
    """Couriers by name, in the order they were introduced."""
    return {}


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('dispatching fails with "{kind}"'))
def dispatching_fails(error, kind):
    assert error["exc"] is not None, "Expected a delivery error but none was raised"
    assert isinstance(error["exc"], DeliveryError)
    assert error["exc"].kind.value == kind
