"""Application tests for order intake via domain.process()."""

import pytest
from delivery.geo import get_geo_client
from delivery.order.creation import CreateOrder
from delivery.order.order import Order, OrderStatus
from delivery.publisher import get_event_sink
from delivery.publisher.fake_adapter import ORDER_CREATED_TOPIC
from delivery.shared.errors import DeliveryError, ErrorKind
from delivery.shared.location import Location
from protean import current_domain
from protean.exceptions import ValidationError


def _create_order(**overrides):
    defaults = {
        "order_id": "ord-001",
        "street": "Tverskaya",
        "volume": 5,
    }
    defaults.update(overrides)
    return current_domain.process(CreateOrder(**defaults), asynchronous=False)


class TestCreateOrderFlow:
    def test_returns_order_id(self):
        assert _create_order() == "ord-001"

    def test_persists_order(self):
        _create_order()
        order = current_domain.repository_for(Order).get("ord-001")
        assert order.status == OrderStatus.CREATED.value
        assert order.volume == 5

    def test_uses_geocoded_location(self):
        get_geo_client().configure(overrides={"Tverskaya": (7, 2)})
        _create_order()
        order = current_domain.repository_for(Order).get("ord-001")
        assert order.location == Location.create(7, 2)

    def test_falls_back_to_random_location(self):
        get_geo_client().configure(available=False)
        _create_order()
        order = current_domain.repository_for(Order).get("ord-001")
        assert 1 <= order.location.x <= 10
        assert 1 <= order.location.y <= 10

    def test_publishes_order_created(self):
        _create_order()
        messages = get_event_sink().messages(ORDER_CREATED_TOPIC)
        assert len(messages) == 1
        assert messages[0]["order_id"] == "ord-001"
        assert messages[0]["event_id"]
        assert messages[0]["occurred_at"]
        assert "courier_id" not in messages[0]


class TestIdempotency:
    def test_same_id_returns_existing_order(self):
        first = _create_order(volume=5)
        second = _create_order(volume=9, street="Arbat")
        assert first == second
        order = current_domain.repository_for(Order).get("ord-001")
        assert order.volume == 5

    def test_replay_does_not_publish_again(self):
        _create_order()
        _create_order()
        assert len(get_event_sink().messages(ORDER_CREATED_TOPIC)) == 1

    def test_replay_skips_geocoding(self):
        _create_order()
        _create_order()
        assert get_geo_client().lookups == ["Tverskaya"]


class TestValidation:
    def test_non_positive_volume_rejected(self):
        with pytest.raises(DeliveryError) as exc:
            _create_order(volume=0)
        assert exc.value.kind == ErrorKind.REQUIRED
        assert current_domain.repository_for(Order).get_by_id("ord-001") is None

    def test_street_required(self):
        with pytest.raises(ValidationError):
            _create_order(street=None)


class TestEventSinkOutage:
    def test_order_is_created_when_sink_is_down(self):
        get_event_sink().configure(should_succeed=False)

        assert _create_order() == "ord-001"

        order = current_domain.repository_for(Order).get("ord-001")
        assert order.status == OrderStatus.CREATED.value

    def test_rejected_payload_is_kept_by_sink(self):
        sink = get_event_sink()
        sink.configure(should_succeed=False)

        _create_order()

        assert sink.messages(ORDER_CREATED_TOPIC) == []
        assert len(sink.rejected) == 1
        topic, payload = sink.rejected[0]
        assert topic == ORDER_CREATED_TOPIC
        assert payload["order_id"] == "ord-001"

    def test_replay_after_recovery_returns_existing_order(self):
        sink = get_event_sink()
        sink.configure(should_succeed=False)
        _create_order()
        sink.configure(should_succeed=True)

        assert _create_order() == "ord-001"
        assert len(current_domain.repository_for(Order).get_not_completed()) == 1
