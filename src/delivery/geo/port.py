"""Geocoding port — abstract interface for street-to-location lookups.

Order intake programs against the port; adapters are swapped via
configuration.
"""

from abc import ABC, abstractmethod

from delivery.shared.location import Location


class GeoPort(ABC):
    """Abstract interface for geocoding adapters."""

    @abstractmethod
    def resolve(self, street: str) -> Location | None:
        """Resolve a street name to a grid location.

        Returns:
            The location, or None when the street is unknown or the
            service cannot be reached.
        """
        ...
