"""Item repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hoard.domain.model.item import Item
from hoard.domain.value import ChestId, ItemId


class ItemRepository(ABC):
    """Repository for Item entity."""

    @abstractmethod
    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID.

        Args:
            item_id: The item's unique identifier

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_chest(self, chest_id: ChestId) -> list[Item]:
        """Find all items of a chest, newest first.

        Args:
            chest_id: The chest's ID

        Returns:
            List of items
        """
        pass

    @abstractmethod
    async def save(self, item: Item) -> Item:
        """Save an item (create or update).

        Args:
            item: The item to save

        Returns:
            The saved item

        Raises:
            IntegrityError: If the chest no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, item_id: ItemId) -> bool:
        """Delete an item.

        Args:
            item_id: The item's ID

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every item of a chest.

        Args:
            chest_id: The chest's ID

        Returns:
            Number of deleted rows
        """
        pass
