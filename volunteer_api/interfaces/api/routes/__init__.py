from fastapi import FastAPI

from .activity_feed import router as activity_feed_router
from .auth import router as auth_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(auth_router)
    app.include_router(activity_feed_router)
