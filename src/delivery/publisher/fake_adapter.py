"""Fake event sink — keeps published payloads in memory.

Configurable failure behavior for exercising sink outages. Rejected payloads
are kept apart from published ones.
"""

from delivery.publisher.port import EventSinkError, EventSinkPort

ORDER_CREATED_TOPIC = "orders.created"
ORDER_COMPLETED_TOPIC = "orders.completed"


class FakeEventSink(EventSinkPort):
    """Fake sink that accepts every payload by default."""

    def __init__(self):
        self.should_succeed = True
        self.failure_reason = "Event sink unavailable"
        self.published: list[tuple[str, dict]] = []
        self.rejected: list[tuple[str, dict]] = []

    def configure(self, should_succeed: bool = True, failure_reason: str = "Event sink unavailable"):
        """Configure the fake sink behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def publish_order_created(self, payload: dict) -> None:
        self._publish(ORDER_CREATED_TOPIC, payload)

    def publish_order_completed(self, payload: dict) -> None:
        self._publish(ORDER_COMPLETED_TOPIC, payload)

    def messages(self, topic: str) -> list[dict]:
        return [payload for published_topic, payload in self.published if published_topic == topic]

    def _publish(self, topic: str, payload: dict) -> None:
        if not self.should_succeed:
            self.rejected.append((topic, dict(payload)))
            raise EventSinkError(self.failure_reason)
        self.published.append((topic, dict(payload)))
