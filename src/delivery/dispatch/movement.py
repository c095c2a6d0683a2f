"""Move tick — command and handler.

Every assigned order moves its courier one step towards the destination.
When the courier arrives the order is completed and its storage place is
freed. A courier is loaded once per tick, so a courier carrying two orders
takes a step towards each of them in turn. With orders on opposite sides
that courier can end every tick where it started and deliver neither; the
move tick has no route planning to prevent it.

An assigned order without a resolvable courier means the stored state is
corrupt: the whole tick fails and nothing is saved. Other failures only
skip the affected order.
"""

import structlog
from protean import handle
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.order.order import Order
from delivery.shared.errors import DeliveryError, ErrorKind

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Courier")
class MoveCouriers:
    """Advance every courier with an assigned order by one step."""


@delivery.command_handler(part_of=Courier)
class MoveCouriersHandler:
    @handle(MoveCouriers)
    def move_couriers(self, command: MoveCouriers) -> list[str]:
        """Returns the ids of orders completed in this tick."""
        order_repo = current_domain.repository_for(Order)
        courier_repo = current_domain.repository_for(Courier)

        couriers: dict[str, Courier] = {}
        completed = []
        orders = order_repo.get_all_assigned()
        for order in orders:
            courier = self._courier_for(order, couriers, courier_repo)
            try:
                courier.move(order.location)
                if courier.location == order.location:
                    order.complete()
                    courier.complete_order(order)
                    order_repo.add(order)
                    completed.append(str(order.id))
                    logger.info("Order delivered", order_id=str(order.id), courier_id=str(courier.id))
            except DeliveryError as exc:
                if exc.kind == ErrorKind.INVALID_STATE:
                    raise
                logger.warning(
                    "Order skipped during move",
                    order_id=str(order.id),
                    courier_id=str(courier.id),
                    error_kind=exc.kind.value,
                    error=exc.message,
                )

        for courier in couriers.values():
            courier_repo.add(courier)

        logger.info("Move tick finished", orders=len(orders), couriers=len(couriers), completed=len(completed))
        return completed

    def _courier_for(self, order: Order, couriers: dict[str, Courier], courier_repo) -> Courier:
        if not order.courier_id:
            raise DeliveryError(
                ErrorKind.INVALID_STATE,
                "courier_id",
                f"Assigned order {order.id} has no courier",
            )

        courier_id = str(order.courier_id)
        if courier_id not in couriers:
            courier = courier_repo.get_by_id(courier_id)
            if courier is None:
                raise DeliveryError(
                    ErrorKind.INVALID_STATE,
                    "courier_id",
                    f"Courier {courier_id} of order {order.id} does not exist",
                )
            couriers[courier_id] = courier
        return couriers[courier_id]
