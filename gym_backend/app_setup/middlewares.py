"""
Middlewares transverses de l'application.
- SessionMiddleware: cookie signé qui porte le panier et les notifications en attente.
- CORSMiddleware: origines du frontend (credentials autorisés pour le cookie de session).
- TrustedHostMiddleware: limite les hôtes acceptés (défense host header).
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from starlette.middleware.sessions import SessionMiddleware

from gym_backend.config import ALLOWED_HOSTS, CORS_ORIGINS, COOKIE_SECURE, SESSION_SECRET_KEY
from gym_backend.utils.rate_limit import SESSION_COOKIE_NAME

def register_basic_middlewares(app: FastAPI) -> None:
    app.add_middleware(
        SessionMiddleware,
        secret_key=SESSION_SECRET_KEY,
        session_cookie=SESSION_COOKIE_NAME,
        same_site="lax",
        https_only=COOKIE_SECURE,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=ALLOWED_HOSTS,
    )
