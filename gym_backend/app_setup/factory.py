"""
Factory d'application pour les entrypoints (gym_backend.asgi, tests).
"""
from fastapi import FastAPI
from .lifespan import lifespan
from .middlewares import register_basic_middlewares
from .exceptions import register_exception_handlers
from .routers import register_routers

def create_app() -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - middlewares (session, CORS, hôtes)
      - gestionnaires d'exceptions (erreurs métier -> toasts JSON)
      - tous les routers (API v1, health)
    """
    app = FastAPI(title="Gym API", lifespan=lifespan)
    register_basic_middlewares(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
