"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Bus de notification + compteur de réservations abonné à bookingUpdated
- Tracker d'état de réservation par cours
- FastAPILimiter (Redis) avec options de test (fakeredis).
Variables d'environnement supportées:
  - DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS=1: désactive complètement (tests)
  - USE_FAKE_REDIS_FOR_TESTS=1: utilise fakeredis (tests)
  - LOCAL_RATE_LIMIT_FALLBACK=1: active un fallback local si l'init échoue
"""
import os
import logging
import redis.asyncio as redis
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi_limiter import FastAPILimiter

from gym_backend.bookings.counter import BookingCounter
from gym_backend.bookings.status import BookingStatusTracker
from gym_backend.notifications.bus import NotificationBus

logger = logging.getLogger("uvicorn.error")


def init_state(app: FastAPI) -> None:
    """Crée le bus, le compteur (abonné puis chargé une première fois) et le tracker."""
    app.state.bus = NotificationBus()
    app.state.booking_status = BookingStatusTracker()
    counter = BookingCounter()
    counter.attach(app.state.bus)
    counter.refresh()
    app.state.booking_counter = counter


async def init_rate_limiter(app: FastAPI) -> None:
    """
    Configure le rate limiting et gère les fallbacks.
    - En cas d'échec de Redis et sans fallback, le rate limiting est désactivé proprement.
    """
    if os.getenv("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS") == "1":
        app.state.rate_limit_enabled = False
        logger.info("Rate limiting disabled by DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS")
        return
    try:
        if os.getenv("USE_FAKE_REDIS_FOR_TESTS") == "1":
            from fakeredis.aioredis import FakeRedis  # tests only
            r = FakeRedis(decode_responses=True)
        else:
            redis_url = os.getenv("RATE_LIMIT_REDIS_URL", "redis://127.0.0.1:6379/0")
            r = redis.from_url(redis_url, encoding="utf-8", decode_responses=True)

        await FastAPILimiter.init(r)
        app.state.rate_limit_enabled = True
        logger.info("Rate limiting enabled")
    except Exception as e:
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            app.state.rate_limit_enabled = True
            logger.warning(f"Rate limiting falling back to local in-memory due to init error: {e}")
        else:
            app.state.rate_limit_enabled = False
            logger.warning(f"Rate limiting disabled due to init error: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_state(app)
    await init_rate_limiter(app)
    yield
    app.state.booking_counter.detach()
