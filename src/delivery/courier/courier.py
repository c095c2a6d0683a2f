"""Courier aggregate and its storage places.

A courier carries orders in storage places. Each place holds at most one
order whose volume fits the place. Every courier is created with a default
place and may get more later; places are only changed through the courier.

Movement happens on a Manhattan grid: each step spends at most ``speed``
units, applied on the X axis first and whatever remains on the Y axis.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer, String, ValueObject

from delivery.courier.events import CourierCreated, CourierMoved, StoragePlaceAdded
from delivery.domain import delivery
from delivery.shared.errors import DeliveryError, ErrorKind
from delivery.shared.location import Location

DEFAULT_STORAGE_PLACE_NAME = getattr(delivery, "DEFAULT_STORAGE_PLACE_NAME", "Bag")
DEFAULT_STORAGE_VOLUME = int(getattr(delivery, "DEFAULT_STORAGE_VOLUME", 10))


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@delivery.entity(part_of="Courier")
class StoragePlace:
    """A single slot in a courier's equipment (a bag, a trunk...)."""

    name = String(required=True, max_length=100)
    total_volume = Integer(required=True, min_value=1)
    order_id = Identifier()

    @classmethod
    def create(cls, name: str, volume: int) -> "StoragePlace":
        if not name or not name.strip():
            raise DeliveryError(ErrorKind.INVALID, "name", "Storage place name must not be empty")
        if volume is None or volume <= 0:
            raise DeliveryError(ErrorKind.INVALID_VOLUME, "total_volume", "Volume must be greater than zero")
        return cls(name=name, total_volume=volume)

    def is_occupied(self) -> bool:
        return self.order_id is not None

    def fits(self, volume: int) -> bool:
        """True if this place is free and large enough for ``volume``."""
        return not self.is_occupied() and volume is not None and 0 < volume <= self.total_volume

    def can_store(self, volume: int) -> None:
        """Raise unless an order of ``volume`` could be stored here right now."""
        if self.is_occupied():
            raise DeliveryError(ErrorKind.OCCUPIED, "order_id", f"Storage place '{self.name}' is occupied")
        if volume is None or volume <= 0 or volume > self.total_volume:
            raise DeliveryError(
                ErrorKind.INVALID_VOLUME,
                "volume",
                f"Volume {volume} does not fit storage place '{self.name}' of {self.total_volume}",
            )

    def store(self, order_id: str, volume: int) -> None:
        self.can_store(volume)
        self.order_id = order_id

    def clear(self, order_id: str) -> None:
        if self.order_id is None or str(self.order_id) != str(order_id):
            raise DeliveryError(
                ErrorKind.INVALID,
                "order_id",
                f"Storage place '{self.name}' does not hold order {order_id}",
            )
        self.order_id = None


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@delivery.aggregate
class Courier:
    name = String(required=True, max_length=100)
    speed = Integer(required=True, min_value=1)
    location = ValueObject(Location, required=True)
    storage_places = HasMany(StoragePlace)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, name: str, speed: int, location: Location | None) -> "Courier":
        """Register a courier with the default storage place."""
        if not name or not name.strip():
            raise DeliveryError.required("name")
        if speed is None or speed <= 0:
            raise DeliveryError(ErrorKind.REQUIRED, "speed", "Speed must be greater than zero")
        if location is None:
            raise DeliveryError.required("location")

        now = datetime.now(UTC)
        courier = cls(
            name=name,
            speed=speed,
            location=location,
            storage_places=[StoragePlace.create(DEFAULT_STORAGE_PLACE_NAME, DEFAULT_STORAGE_VOLUME)],
            created_at=now,
            updated_at=now,
        )
        courier.raise_(
            CourierCreated(
                courier_id=str(courier.id),
                name=name,
                speed=speed,
                location_x=location.x,
                location_y=location.y,
                created_at=now,
            )
        )
        return courier

    # -------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------
    def places(self) -> tuple[StoragePlace, ...]:
        """Storage places in the order they were added (read-only view)."""
        return tuple(self.storage_places or [])

    def add_storage_place(self, name: str, volume: int) -> StoragePlace:
        place = StoragePlace.create(name, volume)
        now = datetime.now(UTC)
        self.add_storage_places(place)
        self.updated_at = now
        self.raise_(
            StoragePlaceAdded(
                courier_id=str(self.id),
                storage_place_id=str(place.id),
                name=place.name,
                total_volume=place.total_volume,
                added_at=now,
            )
        )
        return place

    def has_free_storage_place(self) -> bool:
        return any(not place.is_occupied() for place in self.places())

    def can_take_order(self, order) -> bool:
        if order is None:
            raise DeliveryError.required("order")
        return any(place.fits(order.volume) for place in self.places())

    def take_order(self, order) -> StoragePlace:
        """Store the order in the first place that can hold it."""
        if order is None:
            raise DeliveryError.required("order")
        place = next((p for p in self.places() if p.fits(order.volume)), None)
        if place is None:
            raise DeliveryError(
                ErrorKind.NO_SUITABLE_STORAGE_PLACE,
                "storage_places",
                f"Courier {self.id} has no storage place for an order of volume {order.volume}",
            )
        place.store(str(order.id), order.volume)
        self.updated_at = datetime.now(UTC)
        return place

    def complete_order(self, order) -> None:
        if order is None:
            raise DeliveryError.required("order")
        place = next((p for p in self.places() if str(p.order_id) == str(order.id)), None)
        if place is None:
            return
        place.clear(str(order.id))
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Movement
    # -------------------------------------------------------------------
    def calculate_time_to_location(self, target: Location | None) -> float:
        if target is None:
            raise DeliveryError.required("target")
        return self.location.distance_to(target) / self.speed

    def move(self, target: Location | None) -> None:
        if target is None:
            raise DeliveryError.required("target")

        budget = self.speed
        dx = max(-budget, min(budget, target.x - self.location.x))
        budget -= abs(dx)
        dy = max(-budget, min(budget, target.y - self.location.y))
        if dx == 0 and dy == 0:
            return

        origin = self.location
        self.location = Location.create(origin.x + dx, origin.y + dy)
        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            CourierMoved(
                courier_id=str(self.id),
                from_x=origin.x,
                from_y=origin.y,
                to_x=self.location.x,
                to_y=self.location.y,
                moved_at=now,
            )
        )
