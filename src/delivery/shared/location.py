"""Location value object: a coordinate on the delivery grid.

Coordinates are integers bounded by ``GRID_MIN``/``GRID_MAX`` (inclusive),
read from the ``[custom]`` section of the domain configuration. Distance is
measured in Manhattan units, which is also how couriers move.
"""

import random

from protean.fields import Integer

from delivery.domain import delivery
from delivery.shared.errors import DeliveryError, ErrorKind

GRID_MIN = int(getattr(delivery, "GRID_MIN", 1))
GRID_MAX = int(getattr(delivery, "GRID_MAX", 10))


@delivery.value_object
class Location:
    """An immutable (x, y) point on the grid."""

    x: Integer(required=True, min_value=GRID_MIN, max_value=GRID_MAX)
    y: Integer(required=True, min_value=GRID_MIN, max_value=GRID_MAX)

    @classmethod
    def create(cls, x: int, y: int) -> "Location":
        """Build a location, rejecting coordinates outside the grid."""
        for field, value in (("x", x), ("y", y)):
            if value is None:
                raise DeliveryError.required(field)
            if not GRID_MIN <= value <= GRID_MAX:
                raise DeliveryError(
                    ErrorKind.OUT_OF_RANGE,
                    field,
                    f"{field} must be between {GRID_MIN} and {GRID_MAX}, got {value}",
                )
        return cls(x=x, y=y)

    @classmethod
    def random(cls) -> "Location":
        """A uniformly chosen point, used when no real position is known."""
        return cls(
            x=random.randint(GRID_MIN, GRID_MAX),
            y=random.randint(GRID_MIN, GRID_MAX),
        )

    def distance_to(self, other: "Location | None") -> int:
        if other is None:
            raise DeliveryError.required("target")
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
