"""FastAPI routes for the Delivery domain."""

from uuid import uuid4

from fastapi import APIRouter
from protean.utils.globals import current_domain

from delivery.api.schemas import (
    AddStoragePlaceRequest,
    AssignmentResponse,
    AssignOrdersRequest,
    AssignOrdersResponse,
    CourierIdResponse,
    CourierResponse,
    CreateOrderRequest,
    LocationResponse,
    MoveCouriersResponse,
    OrderIdResponse,
    OrderResponse,
    RegisterCourierRequest,
    StoragePlaceIdResponse,
)
from delivery.courier.courier import Courier
from delivery.courier.registration import AddStoragePlace, RegisterCourier
from delivery.dispatch.assignment import AssignOrders
from delivery.dispatch.movement import MoveCouriers
from delivery.order.creation import CreateOrder
from delivery.order.order import Order

# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: CreateOrderRequest) -> OrderIdResponse:
    """Accept an order for delivery; the street is geocoded to a grid location."""
    command = CreateOrder(
        order_id=body.order_id or str(uuid4()),
        street=body.street,
        volume=body.volume,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    """Orders that have not been delivered yet."""
    orders = current_domain.repository_for(Order).get_not_completed()
    return [
        OrderResponse(id=str(order.id), location=LocationResponse(x=order.location.x, y=order.location.y))
        for order in orders
    ]


# ---------------------------------------------------------------------------
# Courier Router
# ---------------------------------------------------------------------------
courier_router = APIRouter(prefix="/couriers", tags=["couriers"])


@courier_router.post("", status_code=201, response_model=CourierIdResponse)
async def register_courier(body: RegisterCourierRequest) -> CourierIdResponse:
    command = RegisterCourier(name=body.name, speed=body.speed, x=body.x, y=body.y)
    result = current_domain.process(command, asynchronous=False)
    return CourierIdResponse(courier_id=result)


@courier_router.get("", response_model=list[CourierResponse])
async def list_couriers() -> list[CourierResponse]:
    couriers = current_domain.repository_for(Courier).get_all()
    return [
        CourierResponse(
            id=str(courier.id),
            name=courier.name,
            location=LocationResponse(x=courier.location.x, y=courier.location.y),
        )
        for courier in couriers
    ]


@courier_router.post("/{courier_id}/storage-places", status_code=201, response_model=StoragePlaceIdResponse)
async def add_storage_place(courier_id: str, body: AddStoragePlaceRequest) -> StoragePlaceIdResponse:
    command = AddStoragePlace(courier_id=courier_id, name=body.name, volume=body.volume)
    result = current_domain.process(command, asynchronous=False)
    return StoragePlaceIdResponse(storage_place_id=result)


# ---------------------------------------------------------------------------
# Dispatch Router (maintenance triggers for the periodic ticks)
#
# These triggers run the tick command directly. They do not go through the
# TickRunner single-flight guard or the execution lock, which live inside the
# scheduler process (src/server.py). Against a running scheduler the only
# guard is the aggregate version check on commit, so use them for maintenance
# with the scheduler stopped.
# ---------------------------------------------------------------------------
dispatch_router = APIRouter(prefix="/dispatch", tags=["dispatch"])


@dispatch_router.post("/assign", response_model=AssignOrdersResponse)
async def assign_orders(body: AssignOrdersRequest | None = None) -> AssignOrdersResponse:
    batch = body.batch if body is not None else False
    result = current_domain.process(AssignOrders(batch=batch), asynchronous=False)
    return AssignOrdersResponse(assignments=[AssignmentResponse(**item) for item in result or []])


@dispatch_router.post("/move", response_model=MoveCouriersResponse)
async def move_couriers() -> MoveCouriersResponse:
    result = current_domain.process(MoveCouriers(), asynchronous=False)
    return MoveCouriersResponse(completed_order_ids=result or [])
