"""Endpoints de réservation des cours et vue admin des réservations.
- Réservation: POST /api/v1/classes/{class_id}/book (rate limit 5 req / 60s)
- Badge de navigation: GET /api/v1/bookings/count
- Admin: liste filtrable + statistiques, rafraîchissement à la demande
"""
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gym_backend.bookings import service as bookings_service
from gym_backend.bookings.counter import BookingCounter, get_booking_counter
from gym_backend.bookings.status import BookingStatusTracker, get_status_tracker
from gym_backend.notifications.bus import NotificationBus, get_bus
from gym_backend.utils.rate_limit import optional_rate_limit
from gym_backend.validation.contact import ContactInfo

router = APIRouter(prefix="/api/v1", tags=["Bookings API"])

@router.post("/classes/{class_id}/book", dependencies=[Depends(optional_rate_limit(times=5, seconds=60))])
def book_class(
    class_id: int,
    contact: ContactInfo,
    bus: NotificationBus = Depends(get_bus),
    tracker: BookingStatusTracker = Depends(get_status_tracker),
):
    """
    Réserve un cours.
    - Corps: {"customerName", "customerEmail", "customerPhone"?}
    - 400 coordonnées invalides ou cours complet, 404 cours inconnu, 502 écriture échouée
    """
    return JSONResponse(bookings_service.book_class(class_id, contact, bus=bus, tracker=tracker))

@router.get("/classes/{class_id}/status")
def class_status(class_id: int, tracker: BookingStatusTracker = Depends(get_status_tracker)):
    return {"class_id": class_id, "status": tracker.status(class_id).value}

@router.get("/bookings/count")
def bookings_count(counter: BookingCounter = Depends(get_booking_counter)):
    return {"count": counter.value}

@router.get("/admin/bookings")
def admin_bookings(class_id: Optional[int] = None):
    return JSONResponse(bookings_service.admin_bookings(class_id=class_id))

@router.post("/admin/bookings/refresh")
def admin_refresh(bus: NotificationBus = Depends(get_bus), counter: BookingCounter = Depends(get_booking_counter)):
    delivered = bookings_service.refresh(bus)
    return {"delivered": delivered, "count": counter.value}
