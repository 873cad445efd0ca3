"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from hoard.util.di import build_providers


def create_container() -> AsyncContainer:
    """Build the production container, backed by PostgreSQL.

    Nothing is resolved until the first request; settings are read from the
    environment at that point.
    """
    # FastapiProvider exposes the current Request to request-scoped factories
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI app.

    Each HTTP request opens a REQUEST scope, which is also the lifetime of
    the database session and therefore of the transaction.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
