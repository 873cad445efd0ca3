"""Permission repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hoard.domain.model.permission import Permission
from hoard.domain.value import ChestId, UserId


class PermissionRepository(ABC):
    """Repository for Permission entity.

    The store guarantees at most one row per (chest, user) pair.
    """

    @abstractmethod
    async def find(self, chest_id: ChestId, user_id: UserId) -> Optional[Permission]:
        """Find the permission a user holds on a chest.

        Args:
            chest_id: The chest's ID
            user_id: The user's ID

        Returns:
            The permission if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_chest(self, chest_id: ChestId) -> list[Permission]:
        """Find all permissions on a chest, oldest first.

        Args:
            chest_id: The chest's ID

        Returns:
            List of permissions
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Permission]:
        """Find all permissions held by a user.

        Args:
            user_id: The user's ID

        Returns:
            List of permissions
        """
        pass

    @abstractmethod
    async def add(self, permission: Permission) -> Permission:
        """Insert a new permission.

        Args:
            permission: The permission to insert

        Returns:
            The inserted permission

        Raises:
            IntegrityError: If the user already holds a permission on the chest
        """
        pass

    @abstractmethod
    async def delete(self, chest_id: ChestId, user_id: UserId) -> bool:
        """Delete the permission a user holds on a chest.

        Args:
            chest_id: The chest's ID
            user_id: The user's ID

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every permission on a chest.

        Args:
            chest_id: The chest's ID

        Returns:
            Number of deleted rows
        """
        pass
