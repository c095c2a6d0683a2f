"""Repository for the Courier aggregate."""

from delivery.courier.courier import Courier
from delivery.domain import delivery


@delivery.repository(part_of=Courier)
class CourierRepository:
    """Courier lookups used by dispatch and the read side.

    ``get`` from the base repository raises ``ObjectNotFoundError``;
    ``get_by_id`` returns ``None`` instead.
    """

    def get_by_id(self, courier_id: str) -> Courier | None:
        return self._dao.query.filter(id=courier_id).limit(None).all().first

    def get_all(self) -> list[Courier]:
        """All couriers in registration order."""
        return self._dao.query.order_by("created_at").limit(None).all().items

    def get_all_with_free_capacity(self) -> list[Courier]:
        """Couriers with at least one unoccupied storage place, in registration order."""
        return [courier for courier in self.get_all() if courier.has_free_storage_place()]
