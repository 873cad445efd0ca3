"""PostgreSQL implementation of Item repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hoard.domain.model import Item
from hoard.domain.repository import ItemRepository
from hoard.domain.value import ChestId, ItemId
from hoard.persistence.mappers import item_to_dict, row_to_item
from hoard.persistence.tables import items_table


class PostgresItemRepository(ItemRepository):
    """PostgreSQL implementation of ItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID."""
        stmt = select(items_table).where(items_table.c.id == item_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_item(dict(row)) if row else None

    async def find_by_chest(self, chest_id: ChestId) -> list[Item]:
        """Find all items of a chest, newest first."""
        stmt = (
            select(items_table)
            .where(items_table.c.chest_id == chest_id)
            .order_by(items_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_item(dict(row)) for row in result.mappings().all()]

    async def save(self, item: Item) -> Item:
        """Save an item (create or update) inside a SAVEPOINT.

        Raises:
            IntegrityError: If the chest was deleted by a concurrent
                transaction; only the savepoint is rolled back
        """
        item_dict = item_to_dict(item)

        existing = await self.find_by_id(item.id)
        if existing:
            stmt = (
                update(items_table)
                .where(items_table.c.id == item.id)
                .values(**item_dict)
            )
        else:
            stmt = insert(items_table).values(**item_dict)
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return item

    async def delete(self, item_id: ItemId) -> bool:
        """Delete an item."""
        stmt = delete(items_table).where(items_table.c.id == item_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every item of a chest."""
        stmt = delete(items_table).where(items_table.c.chest_id == chest_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
