"""
Cas d'usage 'bookings': réservation d'un cours, vue admin et statistiques.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from gym_backend.catalog import repository as catalog_repository
from gym_backend.errors import NotFoundError, RemoteWriteError, ValidationError
from gym_backend.notifications import email as notify
from gym_backend.notifications.bus import BOOKING_UPDATED, NotificationBus
from gym_backend.validation.contact import ContactInfo, ensure_valid_contact
from . import repository
from .status import BookingStatusTracker

logger = logging.getLogger(__name__)

UNKNOWN_CLASS = "Unknown Class"


def book_class(class_id: int, contact: ContactInfo, *, bus: NotificationBus,
               tracker: BookingStatusTracker) -> Dict[str, Any]:
    """
    Enregistre une réservation.
    Ordre: validation -> écriture (critique) -> email (best-effort) -> état 'booked' -> signal bookingUpdated.
    """
    contact = ensure_valid_contact(contact, require_phone=False)

    gym_class = catalog_repository.get_class(class_id)
    if not gym_class or gym_class.get("active") is False:
        raise NotFoundError("Class not found", title="Booking Error")
    slots = gym_class.get("available_slots")
    if slots is not None and slots <= 0:
        raise ValidationError("class full", title="Class Full")
    class_name = gym_class.get("name") or UNKNOWN_CLASS

    tracker.begin(class_id)
    booking = repository.insert_booking(
        class_id=class_id,
        customer_name=contact.name,
        customer_email=contact.email,
    )
    if not booking:
        tracker.reset(class_id)
        raise RemoteWriteError("Failed to save your booking. Please try again.", title="Booking Error")
    logger.info("bookings.book_class recorded class_id=%s email=%s", class_id, contact.email)

    notify.send_best_effort(
        notify.send_booking_notification,
        customer_name=contact.name,
        customer_email=contact.email,
        class_name=class_name,
        class_id=class_id,
        booking_time=datetime.now().strftime("%d/%m/%Y %H:%M:%S"),
    )
    tracker.mark_booked(class_id)
    bus.publish(BOOKING_UPDATED)
    return {
        "booking": booking,
        "status": tracker.status(class_id).value,
        "title": "Booking Confirmed!",
        "description": f"Your booking for {class_name} has been confirmed.",
    }


def _booking_day(booking: Dict[str, Any]) -> Optional[str]:
    raw = booking.get("booking_date") or booking.get("created_at") or ""
    return str(raw)[:10] or None


def admin_bookings(class_id: Optional[int] = None, today: Optional[str] = None) -> Dict[str, Any]:
    """
    Liste admin (plus récentes d'abord) avec le nom du cours, filtrable par cours.
    Les statistiques portent toujours sur l'ensemble des réservations.
    """
    bookings = repository.list_bookings()
    names = catalog_repository.class_names()
    rows: List[Dict[str, Any]] = [
        dict(b, class_name=names.get(b.get("class_id"), UNKNOWN_CLASS)) for b in bookings
    ]
    today = today or datetime.now(timezone.utc).date().isoformat()
    stats = {
        "total": len(rows),
        "unique_customers": len({(b.get("customer_email") or "").lower() for b in rows}),
        "today": sum(1 for b in rows if _booking_day(b) == today),
    }
    if class_id is not None:
        rows = [b for b in rows if b.get("class_id") == class_id]
    return {
        "bookings": rows,
        "stats": stats,
        "classes": [{"id": k, "name": v} for k, v in names.items()],
    }


def refresh(bus: NotificationBus) -> int:
    """Rafraîchissement à la demande: rediffuse bookingUpdated."""
    delivered = bus.publish(BOOKING_UPDATED)
    logger.info("bookings.refresh delivered=%s", delivered)
    return delivered
