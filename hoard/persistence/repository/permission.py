"""PostgreSQL implementation of Permission repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hoard.domain.model import Permission
from hoard.domain.repository import PermissionRepository
from hoard.domain.value import ChestId, UserId
from hoard.persistence.mappers import permission_to_dict, row_to_permission
from hoard.persistence.tables import chest_permissions_table


class PostgresPermissionRepository(PermissionRepository):
    """PostgreSQL implementation of PermissionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, chest_id: ChestId, user_id: UserId) -> Optional[Permission]:
        """Find the permission a user holds on a chest.

        Backed by the (chest_id, user_id) unique constraint.
        """
        stmt = select(chest_permissions_table).where(
            and_(
                chest_permissions_table.c.chest_id == chest_id,
                chest_permissions_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_permission(dict(row)) if row else None

    async def find_by_chest(self, chest_id: ChestId) -> list[Permission]:
        """Find all permissions on a chest, oldest first."""
        stmt = (
            select(chest_permissions_table)
            .where(chest_permissions_table.c.chest_id == chest_id)
            .order_by(chest_permissions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_permission(dict(row)) for row in result.mappings().all()]

    async def find_by_user(self, user_id: UserId) -> list[Permission]:
        """Find all permissions held by a user."""
        stmt = select(chest_permissions_table).where(
            chest_permissions_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return [row_to_permission(dict(row)) for row in result.mappings().all()]

    async def add(self, permission: Permission) -> Permission:
        """Insert a permission.

        Runs inside a SAVEPOINT so a unique-constraint violation leaves the
        surrounding transaction usable for the caller to report a conflict.

        Raises:
            IntegrityError: If the user already holds a permission on the chest
        """
        stmt = insert(chest_permissions_table).values(**permission_to_dict(permission))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return permission

    async def delete(self, chest_id: ChestId, user_id: UserId) -> bool:
        """Delete the permission a user holds on a chest."""
        stmt = delete(chest_permissions_table).where(
            and_(
                chest_permissions_table.c.chest_id == chest_id,
                chest_permissions_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every permission on a chest."""
        stmt = delete(chest_permissions_table).where(
            chest_permissions_table.c.chest_id == chest_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
