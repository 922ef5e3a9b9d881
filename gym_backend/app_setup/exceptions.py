"""
Gestionnaires d'exceptions.
- GymError (et sous-classes): JSON {"title", "detail", "variant": "destructive", "fields"?}
  avec le code porté par l'erreur (400, 404, 502).
- HTTPException: JSON FastAPI standard {"detail"}.
"""
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from gym_backend.errors import GymError

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(GymError)
    async def gym_error_as_toast(request: Request, exc: GymError):
        logger.info("%s %s -> %s %s: %s", request.method, request.url.path, exc.status_code, exc.title, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_toast())

    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)
