import os
from pathlib import Path

import pytest

# Test layer marker per directory under tests/delivery/
LAYER_MARKERS = {
    "domain": "domain",
    "application": "application",
    "integration": "integration",
    "bdd": "bdd",
}
SLOW_LAYERS = {"integration", "bdd"}


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Protean config overlay (domain.toml section) to run the suite against",
    )


def pytest_sessionstart(session):
    """Select the config overlay before anything imports ``delivery.domain``.

    The domain reads ``domain.toml`` when the ``Domain`` object is created, so
    ``PROTEAN_ENV`` has to be set before test collection.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    for item in items:
        layer = next(
            (part for part in Path(str(item.fspath)).parts if part in LAYER_MARKERS),
            None,
        )
        if layer is None:
            continue

        item.add_marker(getattr(pytest.mark, LAYER_MARKERS[layer]))
        if layer in SLOW_LAYERS and not item.get_closest_marker("fast"):
            item.add_marker(pytest.mark.slow)
