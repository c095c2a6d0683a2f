"""Order intake — command and handler.

The street is geocoded through the configured adapter. When the lookup
yields nothing the order still gets a random location so it can be
dispatched; the fallback is logged.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.geo import get_geo_client
from delivery.order.order import Order
from delivery.shared.location import Location

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Order")
class CreateOrder:
    """Accept an order for delivery. Replaying the same order id is a no-op."""

    order_id = Identifier(required=True)
    street = String(required=True, max_length=255)
    volume = Integer(required=True)


@delivery.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        repo = current_domain.repository_for(Order)
        existing = repo.get_by_id(command.order_id)
        if existing is not None:
            logger.info("Order already exists", order_id=str(existing.id))
            return str(existing.id)

        location = get_geo_client().resolve(command.street)
        if location is None:
            location = Location.random()
            logger.warning(
                "Geocoding failed, using random location",
                order_id=str(command.order_id),
                street=command.street,
                x=location.x,
                y=location.y,
            )

        order = Order.create(order_id=command.order_id, location=location, volume=command.volume)
        repo.add(order)
        logger.info("Order created", order_id=str(order.id), x=location.x, y=location.y, volume=order.volume)
        return str(order.id)
