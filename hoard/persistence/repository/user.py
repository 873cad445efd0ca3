"""PostgreSQL implementation of the user directory."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from hoard.domain.model import User
from hoard.domain.repository import UserRepository
from hoard.domain.value import UserId
from hoard.persistence.mappers import row_to_user, user_to_dict
from hoard.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """User directory stored in the `users` table.

    Rows are written by the identity provider sync; the API only reads them.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._one(select(users_table).where(users_table.c.id == user_id))

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users in one query."""
        if not user_ids:
            return {}
        stmt = select(users_table).where(users_table.c.id.in_(set(user_ids)))
        result = await self.session.execute(stmt)
        users = (row_to_user(dict(row)) for row in result.mappings().all())
        return {user.id: user for user in users}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (exact, case-sensitive match)."""
        return await self._one(select(users_table).where(users_table.c.email == email))

    async def save(self, user: User) -> User:
        """Insert a user, or refresh the email and name of an existing one.

        Raises:
            IntegrityError: If another user already has the email
        """
        values = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={"email": values["email"], "name": values["name"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user. Their permission rows are left in place."""
        await self.session.execute(
            delete(users_table).where(users_table.c.id == user_id)
        )
        await self.session.flush()
