"""
État de réservation par cours: idle -> booking -> booked -> idle (après un délai), ou full.

L'état est optimiste et propre à l'instance d'application. Le retour à idle est
paresseux: il est constaté à la lecture, une fois le délai écoulé.
"""
import threading
import time
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from fastapi import Request

from gym_backend.config import BOOKING_RESET_SECONDS


class BookingStatus(str, Enum):
    IDLE = "idle"
    BOOKING = "booking"
    BOOKED = "booked"
    FULL = "full"


class BookingStatusTracker:
    def __init__(self, reset_after: float = BOOKING_RESET_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.reset_after = reset_after
        self._clock = clock
        self._lock = threading.Lock()
        self._states: Dict[int, Tuple[BookingStatus, float]] = {}

    def begin(self, class_id: int) -> None:
        self._set(class_id, BookingStatus.BOOKING)

    def mark_booked(self, class_id: int) -> None:
        self._set(class_id, BookingStatus.BOOKED)

    def reset(self, class_id: int) -> None:
        with self._lock:
            self._states.pop(class_id, None)

    def status(self, class_id: int, available_slots: Optional[int] = None) -> BookingStatus:
        with self._lock:
            state, since = self._states.get(class_id, (BookingStatus.IDLE, 0.0))
            if state is BookingStatus.BOOKED and self._clock() - since >= self.reset_after:
                del self._states[class_id]
                state = BookingStatus.IDLE
        if state is BookingStatus.IDLE and available_slots is not None and available_slots <= 0:
            return BookingStatus.FULL
        return state

    def _set(self, class_id: int, state: BookingStatus) -> None:
        with self._lock:
            self._states[class_id] = (state, self._clock())


def get_status_tracker(request: Request) -> BookingStatusTracker:
    """Dépendance FastAPI: tracker de l'instance d'application (créé par le lifespan)."""
    return request.app.state.booking_status
