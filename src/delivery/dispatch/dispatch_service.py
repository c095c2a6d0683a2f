"""DispatchService — matches one order with the fastest free courier.

Candidates are filtered by ``Courier.can_take_order`` and compared by the
time they need to reach the order's location. The comparison is strict, so
among couriers with the same time the first one in the list wins.
"""

import structlog
from protean.core.domain_service import BaseDomainService

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.order.order import Order
from delivery.shared.errors import DeliveryError, ErrorKind

logger = structlog.get_logger(__name__)


@delivery.domain_service(part_of=[Order, Courier])
class DispatchService(BaseDomainService):
    def __init__(self, order: Order | None, couriers: list[Courier] | None):
        super().__init__(order, couriers or [])
        self.order = order
        self.couriers = list(couriers or [])

    def __call__(self) -> Courier:
        """Assign the order to the winning courier and return that courier."""
        if self.order is None:
            raise DeliveryError.required("order")
        if not self.couriers:
            raise DeliveryError(ErrorKind.INVALID_LENGTH, "couriers", "At least one courier is required")

        winner = None
        best_time = None
        for courier in self.couriers:
            if not courier.can_take_order(self.order):
                continue
            time_to_location = courier.calculate_time_to_location(self.order.location)
            if best_time is None or time_to_location < best_time:
                winner, best_time = courier, time_to_location

        if winner is None:
            raise DeliveryError(
                ErrorKind.SUITABLE_COURIER_NOT_FOUND,
                "couriers",
                f"No courier can take order {self.order.id} of volume {self.order.volume}",
            )

        self.order.assign(winner)
        winner.take_order(self.order)
        logger.info(
            "Order dispatched",
            order_id=str(self.order.id),
            courier_id=str(winner.id),
            time_to_location=best_time,
        )
        return winner
