"""In-memory item repository for testing."""

from typing import Optional

from hoard.domain.model import Item
from hoard.domain.repository import ItemRepository
from hoard.domain.value import ChestId, ItemId
from hoard.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryItemRepository(ItemRepository):
    """In-memory implementation of ItemRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database = database
        self._items = database.items

    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID."""
        return self._items.get(item_id)

    async def find_by_chest(self, chest_id: ChestId) -> list[Item]:
        """Find all items of a chest, newest first."""
        items = [i for i in self._items.values() if i.chest_id == chest_id]
        return sorted(items, key=lambda i: i.created_at, reverse=True)

    async def save(self, item: Item) -> Item:
        """Save or update an item.

        Raises:
            IntegrityError: If the chest does not exist
        """
        self._database.require_chest(item.chest_id)
        self._items[item.id] = item
        return item

    async def delete(self, item_id: ItemId) -> bool:
        """Delete an item."""
        return self._items.pop(item_id, None) is not None

    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every item of a chest."""
        doomed = [iid for iid, i in self._items.items() if i.chest_id == chest_id]
        for iid in doomed:
            del self._items[iid]
        return len(doomed)
