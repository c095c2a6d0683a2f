"""Event sink adapter abstraction — announces order lifecycle to other systems."""

import os

_event_sink_instance = None


def get_event_sink():
    """Return the configured event sink adapter (singleton).

    Uses FakeEventSink by default. In production, configure via
    EVENT_SINK_ADAPTER environment variable.
    """
    global _event_sink_instance
    if _event_sink_instance is None:
        adapter = os.environ.get("EVENT_SINK_ADAPTER", "fake")
        if adapter == "fake":
            from delivery.publisher.fake_adapter import FakeEventSink

            _event_sink_instance = FakeEventSink()
        else:
            raise ValueError(f"Unknown event sink adapter: {adapter}")
    return _event_sink_instance


def reset_event_sink():
    """Reset the event sink singleton (useful for testing)."""
    global _event_sink_instance
    _event_sink_instance = None
