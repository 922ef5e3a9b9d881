"""
Bus de notification en processus.

Permet à des composants indépendants (compteur de réservations, vue admin)
d'apprendre qu'une donnée a changé. Contrat:
- signal nommé, sans payload;
- livraison synchrone, dans le même thread, dans l'ordre d'abonnement;
- pas de rejeu: un abonné inscrit après l'émission la manque;
- pas d'isolation: une exception d'un abonné remonte à l'émetteur.
"""
import logging
from collections import defaultdict
from typing import Callable, DefaultDict, List

from fastapi import Request

logger = logging.getLogger(__name__)

BOOKING_UPDATED = "bookingUpdated"

Handler = Callable[[], None]


class NotificationBus:
    def __init__(self) -> None:
        self._handlers: DefaultDict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, signal: str, handler: Handler) -> Callable[[], None]:
        """Inscrit handler et retourne la fonction de désinscription."""
        self._handlers[signal].append(handler)

        def _unsubscribe() -> None:
            try:
                self._handlers[signal].remove(handler)
            except ValueError:
                pass

        return _unsubscribe

    def publish(self, signal: str) -> int:
        handlers = list(self._handlers.get(signal, ()))
        logger.debug("bus.publish signal=%s subscribers=%s", signal, len(handlers))
        for handler in handlers:
            handler()
        return len(handlers)

    def subscriber_count(self, signal: str) -> int:
        return len(self._handlers.get(signal, ()))


def get_bus(request: Request) -> NotificationBus:
    """Dépendance FastAPI: bus de l'instance d'application (créé par le lifespan)."""
    return request.app.state.bus
