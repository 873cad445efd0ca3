"""PostgreSQL implementation of Invite repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hoard.domain.model import Invite
from hoard.domain.repository import InviteRepository
from hoard.domain.value import ChestId, InviteId, InviteToken
from hoard.persistence.mappers import invite_to_dict, row_to_invite
from hoard.persistence.tables import chest_invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_token(
        self, token: InviteToken, for_update: bool = False
    ) -> Optional[Invite]:
        """Find an invite by its token.

        With `for_update`, a concurrent redemption of the same token blocks
        until this transaction ends and then finds the row gone.

        Args:
            token: Invite token to look up
            for_update: Take a row lock

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(chest_invites_table).where(
            chest_invites_table.c.token == token.root
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_chest_and_email(
        self, chest_id: ChestId, email: str
    ) -> Optional[Invite]:
        """Find the invite for a chest/email pair."""
        stmt = select(chest_invites_table).where(
            and_(
                chest_invites_table.c.chest_id == chest_id,
                chest_invites_table.c.email == email,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_chest(self, chest_id: ChestId) -> list[Invite]:
        """Find all invites on a chest, newest first."""
        stmt = (
            select(chest_invites_table)
            .where(chest_invites_table.c.chest_id == chest_id)
            .order_by(chest_invites_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def add(self, invite: Invite) -> Invite:
        """Insert an invite inside a SAVEPOINT.

        Raises:
            IntegrityError: If the token or the chest/email pair is taken
        """
        stmt = insert(chest_invites_table).values(**invite_to_dict(invite))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return invite

    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite."""
        stmt = delete(chest_invites_table).where(chest_invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every invite on a chest."""
        stmt = delete(chest_invites_table).where(
            chest_invites_table.c.chest_id == chest_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
