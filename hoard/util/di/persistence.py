"""Persistence providers.

Persistence is the one swappable component: production binds the
repositories to PostgreSQL, tests bind them to in-memory tables.
"""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hoard.config import Settings
from hoard.domain.repository import (
    ChestRepository,
    InviteRepository,
    ItemRepository,
    PermissionRepository,
    UserRepository,
)
from hoard.persistence.database import create_engine, create_session_factory
from hoard.persistence.repository import (
    PostgresChestRepository,
    PostgresInviteRepository,
    PostgresItemRepository,
    PostgresPermissionRepository,
    PostgresUserRepository,
)
from hoard.util.di.base import ProviderBase
from hoard.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class PostgresPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL.

    One engine per container; one session, and so one transaction, per
    request. Every repository of a request shares that session.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the connection pool, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request's session.

        Commits when the request scope closes cleanly and rolls back when it
        closes with an error. Row locks taken with FOR UPDATE are held until
        then.

        dishka sends the error that closed the scope into the generator, so
        it arrives as the value of the yield rather than as a raise.
        """
        async with session_factory() as session:
            error = yield session
            if error is not None:
                await session.rollback()
                logfire.warn("Request transaction rolled back", error=str(error))
                return
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide the user directory."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_chest_repository(self, session: AsyncSession) -> ChestRepository:
        """Provide chests."""
        return PostgresChestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_permission_repository(self, session: AsyncSession) -> PermissionRepository:
        """Provide permission rows."""
        return PostgresPermissionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        """Provide invites."""
        return PostgresInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_item_repository(self, session: AsyncSession) -> ItemRepository:
        """Provide items."""
        return PostgresItemRepository(session)
