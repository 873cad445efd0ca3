"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hoard.config import SERVICE_VERSION, Settings
from hoard.interface.api.errors import register_error_handlers
from hoard.interface.api.routes import (
    chests,
    collaborators,
    health,
    invites,
    items,
)
from hoard.util.di.container import create_container, setup_di
from hoard.util.observability import instrument_fastapi

ROUTERS = [
    health.router,
    chests.router,
    invites.router,
    collaborators.router,
    items.router,
]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the FastAPI application.

    Logfire should already be configured; `scripts/start_app.py` does this
    before importing the app module.

    Args:
        container: DI container to use; the production container if omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Hoard API",
        description="Shared chests of notes, links, todos and files",
        version=SERVICE_VERSION,
    )

    instrument_fastapi(app_instance)

    # Middleware added later wraps earlier middleware:
    # CORS > domain errors > DI container > routes
    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    # Credentials are allowed because the JWT travels in a cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Module-level instance for uvicorn
app = create_app()
