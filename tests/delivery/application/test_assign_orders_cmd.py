"""Application tests for the assign tick."""

import pytest
from delivery.courier.courier import Courier
from delivery.courier.registration import AddStoragePlace, RegisterCourier
from delivery.dispatch.assignment import AssignOrders
from delivery.geo import get_geo_client
from delivery.order.creation import CreateOrder
from delivery.order.order import Order, OrderStatus
from delivery.shared.errors import DeliveryError, ErrorKind
from protean import current_domain


def _create_order(order_id, x=5, y=5, volume=5):
    street = f"street-{order_id}"
    geo = get_geo_client()
    geo.configure(overrides={**geo.overrides, street: (x, y)})
    current_domain.process(CreateOrder(order_id=order_id, street=street, volume=volume), asynchronous=False)
    return order_id


def _register(name, x=1, y=1, speed=1):
    return current_domain.process(RegisterCourier(name=name, speed=speed, x=x, y=y), asynchronous=False)


def _assign(batch=False):
    return current_domain.process(AssignOrders(batch=batch), asynchronous=False)


def _order(order_id):
    return current_domain.repository_for(Order).get(order_id)


def _courier(courier_id):
    return current_domain.repository_for(Courier).get(courier_id)


class TestSingleAssignment:
    def test_no_orders_is_a_no_op(self):
        _register("Alice")
        assert _assign() == []

    def test_no_orders_and_no_couriers_is_a_no_op(self):
        assert _assign() == []

    def test_no_free_couriers(self):
        _create_order("ord-001")
        with pytest.raises(DeliveryError) as exc:
            _assign()
        assert exc.value.kind == ErrorKind.NO_AVAILABLE_COURIERS
        assert _order("ord-001").status == OrderStatus.CREATED.value

    def test_assigns_order_to_courier(self):
        _create_order("ord-001", x=5, y=5)
        courier_id = _register("Alice", x=4, y=5)

        result = _assign()

        assert result == [{"order_id": "ord-001", "courier_id": courier_id}]
        order = _order("ord-001")
        assert order.status == OrderStatus.ASSIGNED.value
        assert order.courier_id == courier_id
        assert _courier(courier_id).places()[0].order_id == "ord-001"

    def test_picks_the_nearest_courier(self):
        _create_order("ord-001", x=5, y=5)
        _register("Far", x=1, y=1)
        near_id = _register("Near", x=5, y=6)

        _assign()

        assert _order("ord-001").courier_id == near_id

    def test_one_order_per_invocation(self):
        _create_order("ord-001")
        _create_order("ord-002")
        _register("Alice")
        _register("Bob")

        _assign()

        assert _order("ord-001").status == OrderStatus.ASSIGNED.value
        assert _order("ord-002").status == OrderStatus.CREATED.value

    def test_oldest_order_first(self):
        _create_order("ord-b")
        _create_order("ord-a")
        _register("Alice")

        result = _assign()

        assert result[0]["order_id"] == "ord-b"

    def test_busy_courier_is_not_considered(self):
        _create_order("ord-001")
        _create_order("ord-002")
        _register("Alice")
        _assign()

        with pytest.raises(DeliveryError) as exc:
            _assign()
        assert exc.value.kind == ErrorKind.NO_AVAILABLE_COURIERS

    def test_order_too_large_for_everyone(self):
        _create_order("ord-001", volume=50)
        _register("Alice")

        with pytest.raises(DeliveryError) as exc:
            _assign()
        assert exc.value.kind == ErrorKind.SUITABLE_COURIER_NOT_FOUND
        assert _order("ord-001").status == OrderStatus.CREATED.value

    def test_courier_with_extra_place_takes_second_order(self):
        _create_order("ord-001")
        _create_order("ord-002")
        courier_id = _register("Alice")
        current_domain.process(AddStoragePlace(courier_id=courier_id, name="Trunk", volume=10), asynchronous=False)

        _assign()
        _assign()

        assert _order("ord-002").courier_id == courier_id
        assert sorted(p.order_id for p in _courier(courier_id).places()) == ["ord-001", "ord-002"]


class TestBatchAssignment:
    def test_assigns_until_couriers_run_out(self):
        for order_id in ("ord-001", "ord-002", "ord-003"):
            _create_order(order_id)
        _register("Alice")
        _register("Bob")

        result = _assign(batch=True)

        assert [a["order_id"] for a in result] == ["ord-001", "ord-002"]
        assert _order("ord-003").status == OrderStatus.CREATED.value

    def test_skips_orders_nobody_can_carry(self):
        _create_order("ord-big", volume=50)
        _create_order("ord-small", volume=3)
        _register("Alice")

        result = _assign(batch=True)

        assert [a["order_id"] for a in result] == ["ord-small"]
        assert _order("ord-big").status == OrderStatus.CREATED.value

    def test_each_order_goes_to_its_fastest_free_courier(self):
        _create_order("ord-001", x=2, y=2)
        _create_order("ord-002", x=9, y=9)
        west = _register("West", x=1, y=1)
        east = _register("East", x=10, y=10)

        _assign(batch=True)

        assert _order("ord-001").courier_id == west
        assert _order("ord-002").courier_id == east

    def test_no_orders(self):
        assert _assign(batch=True) == []

    def test_no_free_couriers(self):
        _create_order("ord-001")
        with pytest.raises(DeliveryError) as exc:
            _assign(batch=True)
        assert exc.value.kind == ErrorKind.NO_AVAILABLE_COURIERS
