"""Fake geocoding adapter — deterministic lookups for testing and development.

A street name always maps to the same grid cell. Known streets can be pinned
to explicit coordinates, and the whole service can be switched off to
exercise the fallback path.
"""

import hashlib

from delivery.geo.port import GeoPort
from delivery.shared.location import GRID_MAX, GRID_MIN, Location


class FakeGeoClient(GeoPort):
    """Fake geocoder that resolves every non-empty street by default."""

    def __init__(self):
        self.available = True
        self.overrides: dict[str, tuple[int, int]] = {}
        self.lookups: list[str] = []

    def configure(self, available: bool = True, overrides: dict[str, tuple[int, int]] | None = None):
        """Configure the fake geocoder behavior for testing."""
        self.available = available
        if overrides is not None:
            self.overrides = {street.strip().lower(): xy for street, xy in overrides.items()}

    def resolve(self, street: str) -> Location | None:
        self.lookups.append(street)
        if not self.available or not street or not street.strip():
            return None

        key = street.strip().lower()
        if key in self.overrides:
            x, y = self.overrides[key]
            return Location.create(x, y)

        digest = hashlib.sha256(key.encode("utf-8")).digest()
        span = GRID_MAX - GRID_MIN + 1
        return Location.create(GRID_MIN + digest[0] % span, GRID_MIN + digest[1] % span)
