"""Order domain events.

``OrderCreated`` and ``OrderCompleted`` are also announced to other systems
through the event sink (see ``delivery.order.publishing``).
"""

from protean.fields import DateTime, Identifier, Integer

from delivery.domain import delivery


@delivery.event(part_of="Order")
class OrderCreated:
    """A new order entered the system and awaits a courier."""

    __version__ = 1

    order_id = Identifier(required=True)
    location_x = Integer(required=True)
    location_y = Integer(required=True)
    volume = Integer(required=True)
    created_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderAssigned:
    """An order was matched with a courier."""

    __version__ = 1

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    assigned_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderCompleted:
    """The courier reached the destination and handed the order over."""

    __version__ = 1

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    completed_at = DateTime(required=True)
