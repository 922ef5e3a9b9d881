import pytest

from gym_backend.notifications.bus import BOOKING_UPDATED, NotificationBus


def test_publish_reaches_every_subscriber_in_order():
    bus = NotificationBus()
    calls = []
    bus.subscribe(BOOKING_UPDATED, lambda: calls.append("a"))
    bus.subscribe(BOOKING_UPDATED, lambda: calls.append("b"))

    assert bus.publish(BOOKING_UPDATED) == 2
    assert calls == ["a", "b"]


def test_no_replay_for_late_subscribers():
    bus = NotificationBus()
    bus.publish(BOOKING_UPDATED)
    calls = []
    bus.subscribe(BOOKING_UPDATED, lambda: calls.append(1))
    assert calls == []


def test_unsubscribe_stops_delivery_and_is_idempotent():
    bus = NotificationBus()
    calls = []
    unsubscribe = bus.subscribe(BOOKING_UPDATED, lambda: calls.append(1))
    unsubscribe()
    unsubscribe()
    assert bus.publish(BOOKING_UPDATED) == 0
    assert calls == []


def test_publish_without_subscribers_is_fine():
    assert NotificationBus().publish("nothing") == 0


def test_subscriber_exception_propagates_to_publisher():
    bus = NotificationBus()

    def _boom():
        raise RuntimeError("subscriber failed")

    bus.subscribe(BOOKING_UPDATED, _boom)
    with pytest.raises(RuntimeError):
        bus.publish(BOOKING_UPDATED)
