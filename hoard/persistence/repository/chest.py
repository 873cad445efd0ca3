"""PostgreSQL implementation of Chest repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hoard.domain.model import Chest
from hoard.domain.repository import ChestRepository
from hoard.domain.value import ChestId, UserId
from hoard.persistence.mappers import chest_to_dict, row_to_chest
from hoard.persistence.tables import chests_table


class PostgresChestRepository(ChestRepository):
    """PostgreSQL implementation of ChestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, chest_id: ChestId, for_update: bool = False
    ) -> Optional[Chest]:
        """Find a chest by ID.

        With `for_update`, the row stays locked until the request's
        transaction ends, which serializes deletion against concurrent
        writers on the same chest.

        Args:
            chest_id: Chest ID to look up
            for_update: Take a row lock

        Returns:
            Chest if found, None otherwise
        """
        stmt = select(chests_table).where(chests_table.c.id == chest_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_chest(dict(row)) if row else None

    async def find_by_ids(self, chest_ids: list[ChestId]) -> list[Chest]:
        """Find several chests in one query, newest first."""
        if not chest_ids:
            return []
        stmt = (
            select(chests_table)
            .where(chests_table.c.id.in_(chest_ids))
            .order_by(chests_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_chest(dict(row)) for row in result.mappings().all()]

    async def find_by_owner(self, owner_id: UserId) -> list[Chest]:
        """Find chests owned by a user, newest first."""
        stmt = (
            select(chests_table)
            .where(chests_table.c.owner_id == owner_id)
            .order_by(chests_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_chest(dict(row)) for row in result.mappings().all()]

    async def save(self, chest: Chest) -> Chest:
        """Save a chest (create or update).

        `owner_id` is never part of an update.
        """
        chest_dict = chest_to_dict(chest)

        existing = await self.find_by_id(chest.id)
        if existing:
            chest_dict.pop("owner_id")
            stmt = (
                update(chests_table)
                .where(chests_table.c.id == chest.id)
                .values(**chest_dict)
            )
        else:
            stmt = insert(chests_table).values(**chest_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return chest

    async def delete(self, chest_id: ChestId) -> None:
        """Delete a chest row."""
        stmt = delete(chests_table).where(chests_table.c.id == chest_id)
        await self.session.execute(stmt)
        await self.session.flush()
