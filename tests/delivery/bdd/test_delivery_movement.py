"""BDD tests for courier movement and order completion."""

from delivery.courier.courier import Courier
from delivery.courier.registration import RegisterCourier
from delivery.dispatch.assignment import AssignOrders
from delivery.dispatch.movement import MoveCouriers
from delivery.geo import get_geo_client
from delivery.order.creation import CreateOrder
from delivery.order.order import Order
from delivery.publisher import get_event_sink
from delivery.publisher.fake_adapter import ORDER_COMPLETED_TOPIC
from delivery.shared.location import Location
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/delivery_movement.feature")


@given(parsers.cfparse("a courier with speed {speed:d} at ({x:d}, {y:d})"), target_fixture="courier")
def a_courier(speed, x, y):
    return Courier.create(name="Walker", speed=speed, location=Location.create(x, y))


@when(parsers.cfparse("the courier moves towards ({x:d}, {y:d})"))
def courier_moves(courier, x, y):
    courier.move(Location.create(x, y))


@then(parsers.cfparse("the courier is at ({x:d}, {y:d})"))
def courier_is_at(courier, x, y):
    assert courier.location == Location.create(x, y)


@given(parsers.cfparse('an order "{order_id}" of volume {volume:d} at street "{street}" located at ({x:d}, {y:d})'))
def an_order(order_id, volume, street, x, y):
    get_geo_client().configure(overrides={street: (x, y)})
    current_domain.process(CreateOrder(order_id=order_id, street=street, volume=volume), asynchronous=False)


@given(parsers.cfparse('a registered courier "{name}" with speed {speed:d} at ({x:d}, {y:d})'))
def a_registered_courier(couriers, name, speed, x, y):
    couriers[name] = current_domain.process(
        RegisterCourier(name=name, speed=speed, x=x, y=y),
        asynchronous=False,
    )


@when("the assign tick runs")
def assign_tick():
    current_domain.process(AssignOrders(), asynchronous=False)


@when(parsers.cfparse("the move tick runs {count:d} times"))
def move_tick(count):
    for _ in range(count):
        current_domain.process(MoveCouriers(), asynchronous=False)


@then(parsers.cfparse('order "{order_id}" is "{status}"'))
def order_is(order_id, status):
    assert current_domain.repository_for(Order).get(order_id).status == status


@then(parsers.cfparse('courier "{name}" is at ({x:d}, {y:d}) with a free storage place'))
def courier_at_with_free_place(couriers, name, x, y):
    courier = current_domain.repository_for(Courier).get(couriers[name])
    assert courier.location == Location.create(x, y)
    assert courier.has_free_storage_place()


@then(parsers.cfparse('the completion of order "{order_id}" was announced'))
def completion_announced(order_id):
    messages = get_event_sink().messages(ORDER_COMPLETED_TOPIC)
    assert [m["order_id"] for m in messages] == [order_id]
