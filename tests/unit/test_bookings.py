import pytest

from gym_backend.bookings import service as bookings_service
from gym_backend.bookings.counter import BookingCounter
from gym_backend.bookings.status import BookingStatus, BookingStatusTracker
from gym_backend.errors import NotFoundError, RemoteWriteError, ValidationError
from gym_backend.notifications.bus import BOOKING_UPDATED, NotificationBus
from gym_backend.validation.contact import ContactInfo


class _Clock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def _contact(**kw):
    data = {"name": "Arben Hoxha", "email": "arben@gmail.com"}
    data.update(kw)
    return ContactInfo(**data)


def test_status_cycle_with_timed_reset():
    clock = _Clock()
    tracker = BookingStatusTracker(reset_after=3, clock=clock)
    assert tracker.status(1) is BookingStatus.IDLE

    tracker.begin(1)
    assert tracker.status(1) is BookingStatus.BOOKING
    tracker.mark_booked(1)
    clock.now += 2.9
    assert tracker.status(1) is BookingStatus.BOOKED
    clock.now += 0.2
    assert tracker.status(1) is BookingStatus.IDLE


def test_status_is_independent_per_class_and_reports_full():
    tracker = BookingStatusTracker(clock=_Clock())
    tracker.begin(1)
    assert tracker.status(2) is BookingStatus.IDLE
    assert tracker.status(3, available_slots=0) is BookingStatus.FULL
    assert tracker.status(1, available_slots=0) is BookingStatus.BOOKING


def test_counter_refreshes_on_signal_and_keeps_last_value_on_failure():
    values = iter([4, None, 6])
    bus = NotificationBus()
    counter = BookingCounter(fetch=lambda: next(values))
    counter.attach(bus)

    bus.publish(BOOKING_UPDATED)
    assert counter.value == 4
    bus.publish(BOOKING_UPDATED)
    assert counter.value == 4
    bus.publish(BOOKING_UPDATED)
    assert counter.value == 6

    counter.detach()
    assert bus.subscriber_count(BOOKING_UPDATED) == 0


def test_book_class_records_notifies_and_publishes(sent_emails):
    bus, tracker = NotificationBus(), BookingStatusTracker(clock=_Clock())
    signals = []
    bus.subscribe(BOOKING_UPDATED, lambda: signals.append(tracker.status(1)))

    result = bookings_service.book_class(1, _contact(), bus=bus, tracker=tracker)

    assert result["status"] == "booked"
    assert result["title"] == "Booking Confirmed!"
    assert "Morning Yoga" in result["description"]
    assert signals == [BookingStatus.BOOKED]
    assert sent_emails[0]["subject"] == "New Class Booking: Morning Yoga"


def test_book_class_email_failure_does_not_block(monkeypatch):
    from gym_backend.errors import NotificationDeliveryError

    def _fail(*a, **kw):
        raise NotificationDeliveryError("down")

    monkeypatch.setattr("gym_backend.notifications.email.send_email", _fail)
    bus, tracker = NotificationBus(), BookingStatusTracker(clock=_Clock())
    result = bookings_service.book_class(1, _contact(), bus=bus, tracker=tracker)
    assert result["status"] == "booked"


def test_book_class_write_failure_publishes_nothing(monkeypatch, sent_emails):
    monkeypatch.setattr("gym_backend.bookings.repository.insert_booking", lambda **kw: None)
    bus, tracker = NotificationBus(), BookingStatusTracker(clock=_Clock())
    signals = []
    bus.subscribe(BOOKING_UPDATED, lambda: signals.append(1))

    with pytest.raises(RemoteWriteError):
        bookings_service.book_class(1, _contact(), bus=bus, tracker=tracker)

    assert signals == []
    assert sent_emails == []
    assert tracker.status(1) is BookingStatus.IDLE


def test_book_class_rejections():
    bus, tracker = NotificationBus(), BookingStatusTracker()
    with pytest.raises(ValidationError):
        bookings_service.book_class(1, _contact(email="arben@yahoo.com"), bus=bus, tracker=tracker)
    with pytest.raises(ValidationError):
        bookings_service.book_class(1, _contact(phone="12"), bus=bus, tracker=tracker)
    with pytest.raises(NotFoundError):
        bookings_service.book_class(99, _contact(), bus=bus, tracker=tracker)
    with pytest.raises(ValidationError) as exc:
        bookings_service.book_class(2, _contact(), bus=bus, tracker=tracker)
    assert exc.value.message == "class full"


def test_admin_bookings_names_filter_and_stats(monkeypatch):
    rows = [
        {"id": "b3", "class_id": 2, "customer_email": "b@gmail.com", "created_at": "2026-10-19T09:00:00+00:00"},
        {"id": "b2", "class_id": 1, "customer_email": "A@gmail.com", "created_at": "2026-10-19T08:00:00+00:00"},
        {"id": "b1", "class_id": 7, "customer_email": "a@gmail.com", "created_at": "2026-10-18T08:00:00+00:00"},
    ]
    monkeypatch.setattr("gym_backend.bookings.repository.list_bookings", lambda class_id=None, limit=500: rows)

    data = bookings_service.admin_bookings(today="2026-10-19")
    assert [b["class_name"] for b in data["bookings"]] == ["Spin Class", "Morning Yoga", "Unknown Class"]
    assert data["stats"] == {"total": 3, "unique_customers": 2, "today": 2}

    filtered = bookings_service.admin_bookings(class_id=1, today="2026-10-19")
    assert [b["id"] for b in filtered["bookings"]] == ["b2"]
    assert filtered["stats"]["total"] == 3
