import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from volunteer_api.config import get_settings
from volunteer_api.infrastructure.database import engine, initialize_database
from volunteer_api.interfaces.api.routes import register_routes


def configure_logging(level: str) -> None:
    """Configura el logging raíz con el nivel indicado en la configuración."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Volunteer Feed API", lifespan=lifespan)

    # Autoriza peticiones desde el frontend configurado.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
