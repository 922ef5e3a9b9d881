from typing import Dict, Any
from fastapi import Request, Response, HTTPException
import os
import time
import secrets

# Cookie posé par SessionMiddleware (panier, toasts)
SESSION_COOKIE_NAME = "session"
VISITOR_ID_KEY = "visitor_id"

def _visitor_key(req: Request) -> str:
    # Priorité: visitor_id stable en session, puis IP
    path = req.url.path
    if "session" in req.scope:
        visitor_id = req.session.get(VISITOR_ID_KEY)
        if not visitor_id:
            visitor_id = secrets.token_hex(8)
            req.session[VISITOR_ID_KEY] = visitor_id
        return f"visitor:{visitor_id}:{path}"
    ip = req.client.host if req.client else "local"
    return f"ip:{ip}:{path}"

def optional_rate_limit(times: int, seconds: int):
    """
    Dépendance de limitation de débit (checkout, réservation, demandes).
    - LOCAL_RATE_LIMIT_FALLBACK=1: fenêtre glissante en mémoire (dev)
    - app.state.rate_limit_enabled == False: désactivé
    - sinon fastapi-limiter (Redis)
    """
    async def _dep(request: Request, response: Response):
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = _visitor_key(request)
            store = getattr(request.app.state, "_rl_store", {})
            hits = [t for t in store.get(key, []) if now - t < seconds]
            if len(hits) >= times:
                raise HTTPException(status_code=429, detail="Too Many Requests")
            hits.append(now)
            store[key] = hits
            request.app.state._rl_store = store
            return

        if getattr(request.app.state, "rate_limit_enabled", None) is False:
            return

        try:
            from fastapi_limiter.depends import RateLimiter
            async def _identifier(req: Request) -> str:
                return _visitor_key(req)
            return await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
        except HTTPException:
            raise
        except Exception:
            # fastapi-limiter indisponible (ex: Redis hors ligne): pas de 429
            return
    return _dep

def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)
    try:
        from fastapi_limiter import FastAPILimiter
        limiter_ready = getattr(FastAPILimiter, "redis", None) is not None
    except Exception:
        limiter_ready = False
    return {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": limiter_ready,
        "backend": "redis" if limiter_ready else None,
    }
