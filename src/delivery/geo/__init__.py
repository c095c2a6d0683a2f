"""Geocoding adapter abstraction — resolves street names to grid locations."""

import os

_geo_client_instance = None


def get_geo_client():
    """Return the configured geocoding adapter (singleton).

    Uses FakeGeoClient by default. Configure via the GEO_ADAPTER
    environment variable.
    """
    global _geo_client_instance
    if _geo_client_instance is None:
        adapter = os.environ.get("GEO_ADAPTER", "fake")
        if adapter == "fake":
            from delivery.geo.fake_adapter import FakeGeoClient

            _geo_client_instance = FakeGeoClient()
        else:
            raise ValueError(f"Unknown geo adapter: {adapter}")
    return _geo_client_instance


def reset_geo_client():
    """Reset the geocoding singleton (useful for testing)."""
    global _geo_client_instance
    _geo_client_instance = None
