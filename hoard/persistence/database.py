"""Engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hoard.config import SERVICE_NAME, Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine (asyncpg driver).

    Every connection gets a `lock_timeout`, so a request waiting on a row
    locked by a concurrent chest deletion or invite redemption fails instead
    of hanging.

    Args:
        settings: Application settings

    Returns:
        Configured async engine
    """
    server_settings = {
        "application_name": SERVICE_NAME,
        "lock_timeout": str(settings.database.lock_timeout_ms),
    }
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": server_settings},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Repositories work with Core statements and pydantic models, so nothing
    is tracked by the session beyond the open transaction.

    Args:
        engine: Database engine

    Returns:
        Session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
