"""Event sink port — abstract interface for integration event publishing.

Payloads are plain dicts shaped as::

    {"event_id": str, "occurred_at": ISO-8601 str, "order_id": str,
     "courier_id": str}  # courier_id on completion only

Delivery and ordering guarantees belong to the adapter.
"""

from abc import ABC, abstractmethod


class EventSinkError(Exception):
    """Raised by adapters when a payload could not be handed over."""


class EventSinkPort(ABC):
    """Abstract interface for event sink adapters."""

    @abstractmethod
    def publish_order_created(self, payload: dict) -> None:
        """Announce that an order was created."""
        ...

    @abstractmethod
    def publish_order_completed(self, payload: dict) -> None:
        """Announce that an order was delivered."""
        ...
