import logging
from typing import Callable, Optional

from fastapi import Request

from gym_backend.notifications.bus import BOOKING_UPDATED, NotificationBus
from . import repository

logger = logging.getLogger(__name__)


class BookingCounter:
    """
    Abonné au signal bookingUpdated: relit le nombre de réservations à chaque signal
    (badge de la navigation). Conserve la dernière valeur connue si la lecture échoue.
    """

    def __init__(self, fetch: Optional[Callable[[], Optional[int]]] = None):
        self._fetch = fetch
        self.value = 0
        self._unsubscribe: Optional[Callable[[], None]] = None

    def refresh(self) -> None:
        count = (self._fetch or repository.count_bookings)()
        if count is None:
            logger.warning("bookings.counter refresh failed, keeping %s", self.value)
            return
        self.value = count

    def attach(self, bus: NotificationBus) -> None:
        self._unsubscribe = bus.subscribe(BOOKING_UPDATED, self.refresh)

    def detach(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None


def get_booking_counter(request: Request) -> BookingCounter:
    return request.app.state.booking_counter
