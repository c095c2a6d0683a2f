"""Repository for the Order aggregate."""

from delivery.domain import delivery
from delivery.order.order import Order, OrderStatus


@delivery.repository(part_of=Order)
class OrderRepository:
    """Order lookups used by the ticks and the read side.

    Queries return orders oldest first; the base query is capped, so every
    list query lifts the limit.
    """

    def get_by_id(self, order_id: str) -> Order | None:
        return self._dao.query.filter(id=order_id).limit(None).all().first

    def get_oldest_created(self) -> Order | None:
        return self._dao.query.filter(status=OrderStatus.CREATED.value).order_by("created_at").limit(1).all().first

    def get_all_created(self) -> list[Order]:
        return self._by_status(OrderStatus.CREATED)

    def get_all_assigned(self) -> list[Order]:
        return self._by_status(OrderStatus.ASSIGNED)

    def get_not_completed(self) -> list[Order]:
        return (
            self._dao.query.filter(status__in=[OrderStatus.CREATED.value, OrderStatus.ASSIGNED.value])
            .order_by("created_at")
            .limit(None)
            .all()
            .items
        )

    def _by_status(self, status: OrderStatus) -> list[Order]:
        return self._dao.query.filter(status=status.value).order_by("created_at").limit(None).all().items
