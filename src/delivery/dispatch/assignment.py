"""Assign tick — command and handler.

By default one invocation assigns the oldest waiting order. In batch mode
every waiting order is tried, oldest first, until no courier with free
capacity is left; orders that no courier can carry are skipped.

Everything is saved in the handler's unit of work, so a failure leaves no
partial assignment behind.
"""

import structlog
from protean import handle
from protean.fields import Boolean
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.dispatch.dispatch_service import DispatchService
from delivery.domain import delivery
from delivery.order.order import Order
from delivery.shared.errors import DeliveryError, ErrorKind

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Order")
class AssignOrders:
    """Match waiting orders with free couriers."""

    batch = Boolean(default=False)


def _no_couriers() -> DeliveryError:
    return DeliveryError(ErrorKind.NO_AVAILABLE_COURIERS, "couriers", "No courier has free capacity")


@delivery.command_handler(part_of=Order)
class AssignOrdersHandler:
    @handle(AssignOrders)
    def assign_orders(self, command: AssignOrders) -> list[dict]:
        """Returns ``[{"order_id": ..., "courier_id": ...}]`` for every assignment made."""
        if command.batch:
            return self._assign_all()

        order_repo = current_domain.repository_for(Order)
        courier_repo = current_domain.repository_for(Courier)

        order = order_repo.get_oldest_created()
        if order is None:
            logger.debug("No orders awaiting a courier")
            return []

        couriers = courier_repo.get_all_with_free_capacity()
        if not couriers:
            raise _no_couriers()

        courier = DispatchService(order, couriers)()
        order_repo.add(order)
        courier_repo.add(courier)
        return [{"order_id": str(order.id), "courier_id": str(courier.id)}]

    def _assign_all(self) -> list[dict]:
        order_repo = current_domain.repository_for(Order)
        courier_repo = current_domain.repository_for(Courier)

        orders = order_repo.get_all_created()
        if not orders:
            logger.debug("No orders awaiting a courier")
            return []

        couriers = courier_repo.get_all_with_free_capacity()
        if not couriers:
            raise _no_couriers()

        assignments = []
        for order in orders:
            candidates = [courier for courier in couriers if courier.has_free_storage_place()]
            if not candidates:
                break
            try:
                courier = DispatchService(order, candidates)()
            except DeliveryError as exc:
                if exc.kind != ErrorKind.SUITABLE_COURIER_NOT_FOUND:
                    raise
                logger.info("Order skipped, no courier can carry it", order_id=str(order.id), volume=order.volume)
                continue

            order_repo.add(order)
            courier_repo.add(courier)
            assignments.append({"order_id": str(order.id), "courier_id": str(courier.id)})

        logger.info("Batch assignment finished", waiting=len(orders), assigned=len(assignments))
        return assignments
