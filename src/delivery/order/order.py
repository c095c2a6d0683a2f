"""Order aggregate.

State Machine:
    CREATED → ASSIGNED → COMPLETED

The courier is referenced by identifier only; the order never holds the
courier object itself.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String, ValueObject

from delivery.domain import delivery
from delivery.order.events import OrderAssigned, OrderCompleted, OrderCreated
from delivery.shared.errors import DeliveryError, ErrorKind
from delivery.shared.location import Location

NIL_ID = "00000000-0000-0000-0000-000000000000"


class OrderStatus(Enum):
    CREATED = "Created"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"


_VALID_TRANSITIONS = {
    OrderStatus.CREATED: {OrderStatus.ASSIGNED},
    OrderStatus.ASSIGNED: {OrderStatus.COMPLETED},
    OrderStatus.COMPLETED: set(),  # terminal
}


@delivery.aggregate
class Order:
    location = ValueObject(Location, required=True)
    volume = Integer(required=True, min_value=1)
    status = String(
        max_length=20,
        choices=OrderStatus,
        default=OrderStatus.CREATED.value,
    )
    courier_id = Identifier()
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id: str, location: Location | None, volume: int) -> "Order":
        """Create an order awaiting assignment.

        The identifier is supplied by the caller (it comes from the basket
        that produced the order), so the nil UUID is rejected.
        """
        if not order_id or str(order_id) == NIL_ID:
            raise DeliveryError.required("order_id")
        if location is None:
            raise DeliveryError.required("location")
        if volume is None or volume <= 0:
            raise DeliveryError(ErrorKind.REQUIRED, "volume", "Volume must be greater than zero")

        now = datetime.now(UTC)
        order = cls(
            id=str(order_id),
            location=location,
            volume=volume,
            status=OrderStatus.CREATED.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                location_x=location.x,
                location_y=location.y,
                volume=volume,
                created_at=now,
            )
        )
        return order

    def _can_transition(self, target_status: OrderStatus) -> bool:
        return target_status in _VALID_TRANSITIONS.get(OrderStatus(self.status), set())

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def assign(self, courier) -> None:
        if courier is None:
            raise DeliveryError.required("courier")
        if not self._can_transition(OrderStatus.ASSIGNED):
            raise DeliveryError(
                ErrorKind.ALREADY_ASSIGNED,
                "status",
                f"Order {self.id} is {self.status} and cannot be assigned",
            )

        now = datetime.now(UTC)
        self.courier_id = str(courier.id)
        self.status = OrderStatus.ASSIGNED.value
        self.updated_at = now
        self.raise_(
            OrderAssigned(
                order_id=str(self.id),
                courier_id=self.courier_id,
                assigned_at=now,
            )
        )

    def complete(self) -> None:
        if not self._can_transition(OrderStatus.COMPLETED) or not self.courier_id:
            raise DeliveryError(
                ErrorKind.NOT_ASSIGNED,
                "status",
                f"Order {self.id} is {self.status} and cannot be completed",
            )

        now = datetime.now(UTC)
        self.status = OrderStatus.COMPLETED.value
        self.updated_at = now
        self.raise_(
            OrderCompleted(
                order_id=str(self.id),
                courier_id=str(self.courier_id),
                completed_at=now,
            )
        )
