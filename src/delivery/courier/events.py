"""Courier domain events."""

from protean.fields import DateTime, Identifier, Integer, String

from delivery.domain import delivery


@delivery.event(part_of="Courier")
class CourierCreated:
    """A courier was registered with its default storage place."""

    __version__ = 1

    courier_id = Identifier(required=True)
    name = String(required=True)
    speed = Integer(required=True)
    location_x = Integer(required=True)
    location_y = Integer(required=True)
    created_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class StoragePlaceAdded:
    """An extra storage place was attached to a courier."""

    __version__ = 1

    courier_id = Identifier(required=True)
    storage_place_id = Identifier(required=True)
    name = String(required=True)
    total_volume = Integer(required=True)
    added_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class CourierMoved:
    """A courier advanced one step towards a destination."""

    __version__ = 1

    courier_id = Identifier(required=True)
    from_x = Integer(required=True)
    from_y = Integer(required=True)
    to_x = Integer(required=True)
    to_y = Integer(required=True)
    moved_at = DateTime(required=True)
