"""In-memory chest repository for testing."""

from typing import Optional

from hoard.domain.model import Chest
from hoard.domain.repository import ChestRepository
from hoard.domain.value import ChestId, UserId
from hoard.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryChestRepository(ChestRepository):
    """In-memory implementation of ChestRepository for testing.

    Row locks are not needed: nothing suspends between a read and the
    write that depends on it.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self._chests = database.chests

    async def find_by_id(
        self, chest_id: ChestId, for_update: bool = False
    ) -> Optional[Chest]:
        """Find a chest by ID."""
        return self._chests.get(chest_id)

    async def find_by_ids(self, chest_ids: list[ChestId]) -> list[Chest]:
        """Find several chests by ID, newest first."""
        chests = [self._chests[cid] for cid in chest_ids if cid in self._chests]
        return sorted(chests, key=lambda c: c.created_at, reverse=True)

    async def find_by_owner(self, owner_id: UserId) -> list[Chest]:
        """Find chests owned by a user, newest first."""
        chests = [c for c in self._chests.values() if c.owner_id == owner_id]
        return sorted(chests, key=lambda c: c.created_at, reverse=True)

    async def save(self, chest: Chest) -> Chest:
        """Save or update a chest, keeping the stored owner."""
        existing = self._chests.get(chest.id)
        if existing:
            chest = chest.model_copy(update={"owner_id": existing.owner_id})
        self._chests[chest.id] = chest
        return chest

    async def delete(self, chest_id: ChestId) -> None:
        """Delete a chest."""
        self._chests.pop(chest_id, None)
