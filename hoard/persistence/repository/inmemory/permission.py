"""In-memory permission repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from hoard.domain.model import Permission
from hoard.domain.repository import PermissionRepository
from hoard.domain.value import ChestId, UserId
from hoard.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryPermissionRepository(PermissionRepository):
    """In-memory implementation of PermissionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database = database
        self._permissions = database.permissions

    async def find(self, chest_id: ChestId, user_id: UserId) -> Optional[Permission]:
        """Find the permission a user holds on a chest."""
        for permission in self._permissions.values():
            if permission.chest_id == chest_id and permission.user_id == user_id:
                return permission
        return None

    async def find_by_chest(self, chest_id: ChestId) -> list[Permission]:
        """Find all permissions on a chest, oldest first."""
        permissions = [p for p in self._permissions.values() if p.chest_id == chest_id]
        return sorted(permissions, key=lambda p: p.created_at)

    async def find_by_user(self, user_id: UserId) -> list[Permission]:
        """Find all permissions held by a user."""
        return [p for p in self._permissions.values() if p.user_id == user_id]

    async def add(self, permission: Permission) -> Permission:
        """Insert a permission.

        Raises:
            IntegrityError: If the user already holds a permission on the chest,
                or the chest does not exist
        """
        self._database.require_chest(permission.chest_id)
        if await self.find(permission.chest_id, permission.user_id):
            raise IntegrityError("Duplicate permission", None, Exception())
        self._permissions[permission.id] = permission
        return permission

    async def delete(self, chest_id: ChestId, user_id: UserId) -> bool:
        """Delete the permission a user holds on a chest."""
        permission = await self.find(chest_id, user_id)
        if permission is None:
            return False
        del self._permissions[permission.id]
        return True

    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every permission on a chest."""
        doomed = [pid for pid, p in self._permissions.items() if p.chest_id == chest_id]
        for pid in doomed:
            del self._permissions[pid]
        return len(doomed)
