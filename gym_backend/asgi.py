"""
ASGI entrypoint: expose `app` pour uvicorn / gunicorn (`gym_backend.asgi:app`).
Toute la configuration est centralisée dans gym_backend.app_setup.
"""

from gym_backend.app import app

if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(
        "gym_backend.asgi:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
