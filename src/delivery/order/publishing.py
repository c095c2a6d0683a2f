"""Outbound integration events — Order lifecycle changes go to the event sink.

Only creation and completion are announced; assignment is internal to
dispatch.

The handler runs after the order is committed. A sink failure is logged at
error level with the full payload and does not fail the committed operation.
"""

from uuid import uuid4

import structlog
from protean.utils.mixins import handle

from delivery.domain import delivery
from delivery.order.events import OrderCompleted, OrderCreated
from delivery.order.order import Order
from delivery.publisher import get_event_sink
from delivery.publisher.port import EventSinkError

logger = structlog.get_logger(__name__)


def _event_id(event) -> str:
    return str(event._metadata.headers.id or uuid4())


def _log_unpublished(topic: str, payload: dict, exc: EventSinkError) -> None:
    logger.error(
        "Event sink rejected payload",
        topic=topic,
        order_id=payload["order_id"],
        event_id=payload["event_id"],
        payload=payload,
        error=str(exc),
    )


@delivery.event_handler(part_of=Order)
class OrderStatusChangedPublisher:
    """Translates Order domain events into event sink payloads."""

    @handle(OrderCreated)
    def on_order_created(self, event: OrderCreated) -> None:
        payload = {
            "event_id": _event_id(event),
            "occurred_at": event.created_at.isoformat(),
            "order_id": str(event.order_id),
        }
        try:
            get_event_sink().publish_order_created(payload)
        except EventSinkError as exc:
            _log_unpublished("order_created", payload, exc)
            return
        logger.info("Published order created", order_id=payload["order_id"], event_id=payload["event_id"])

    @handle(OrderCompleted)
    def on_order_completed(self, event: OrderCompleted) -> None:
        payload = {
            "event_id": _event_id(event),
            "occurred_at": event.completed_at.isoformat(),
            "order_id": str(event.order_id),
            "courier_id": str(event.courier_id),
        }
        try:
            get_event_sink().publish_order_completed(payload)
        except EventSinkError as exc:
            _log_unpublished("order_completed", payload, exc)
            return
        logger.info(
            "Published order completed",
            order_id=payload["order_id"],
            courier_id=payload["courier_id"],
            event_id=payload["event_id"],
        )
