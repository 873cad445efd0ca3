"""Chest repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hoard.domain.model.chest import Chest
from hoard.domain.value import ChestId, UserId


class ChestRepository(ABC):
    """Repository for Chest aggregate.

    Defines the contract for chest persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, chest_id: ChestId, for_update: bool = False
    ) -> Optional[Chest]:
        """Find a chest by ID.

        Args:
            chest_id: The chest's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The chest if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, chest_ids: list[ChestId]) -> list[Chest]:
        """Find several chests at once.

        Args:
            chest_ids: Identifiers to look up

        Returns:
            Found chests; missing IDs are skipped
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> list[Chest]:
        """Find chests owned by a user, newest first.

        Args:
            owner_id: The owner's ID

        Returns:
            List of owned chests
        """
        pass

    @abstractmethod
    async def save(self, chest: Chest) -> Chest:
        """Save a chest (create or update).

        Args:
            chest: The chest to save

        Returns:
            The saved chest
        """
        pass

    @abstractmethod
    async def delete(self, chest_id: ChestId) -> None:
        """Delete a chest row.

        Children must be removed first within the same transaction.

        Args:
            chest_id: The chest's unique identifier
        """
        pass
