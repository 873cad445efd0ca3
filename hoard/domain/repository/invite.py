"""Invite repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hoard.domain.model.invite import Invite
from hoard.domain.value import ChestId, InviteId, InviteToken


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_token(
        self, token: InviteToken, for_update: bool = False
    ) -> Optional[Invite]:
        """Find an invite by token.

        Used when the invitee opens the invite link.

        Args:
            token: The invite token
            for_update: Lock the row until the current transaction ends

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_chest_and_email(
        self, chest_id: ChestId, email: str
    ) -> Optional[Invite]:
        """Find the invite for a chest/email pair, expired or not.

        Args:
            chest_id: The chest's ID
            email: The invitee's email

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_chest(self, chest_id: ChestId) -> list[Invite]:
        """Find all invites on a chest, newest first.

        Args:
            chest_id: The chest's ID

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def add(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: The invite to insert

        Returns:
            The inserted invite

        Raises:
            IntegrityError: If the token or the chest/email pair is taken
        """
        pass

    @abstractmethod
    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite.

        Args:
            invite_id: The invite's ID

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every invite on a chest.

        Args:
            chest_id: The chest's ID

        Returns:
            Number of deleted rows
        """
        pass
