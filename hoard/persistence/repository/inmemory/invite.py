"""In-memory invite repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from hoard.domain.model import Invite
from hoard.domain.repository import InviteRepository
from hoard.domain.value import ChestId, InviteId, InviteToken
from hoard.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database = database
        self._invites = database.invites

    async def find_by_token(
        self, token: InviteToken, for_update: bool = False
    ) -> Optional[Invite]:
        """Find an invite by its token."""
        for invite in self._invites.values():
            if invite.token == token:
                return invite
        return None

    async def find_by_chest_and_email(
        self, chest_id: ChestId, email: str
    ) -> Optional[Invite]:
        """Find the invite for a chest/email pair."""
        for invite in self._invites.values():
            if invite.chest_id == chest_id and invite.email == email:
                return invite
        return None

    async def find_by_chest(self, chest_id: ChestId) -> list[Invite]:
        """Find all invites on a chest, newest first."""
        invites = [i for i in self._invites.values() if i.chest_id == chest_id]
        return sorted(invites, key=lambda i: i.created_at, reverse=True)

    async def add(self, invite: Invite) -> Invite:
        """Insert an invite.

        Raises:
            IntegrityError: If the token or the chest/email pair is taken,
                or the chest does not exist
        """
        self._database.require_chest(invite.chest_id)
        if await self.find_by_token(invite.token):
            raise IntegrityError("Duplicate invite token", None, Exception())
        if await self.find_by_chest_and_email(invite.chest_id, invite.email):
            raise IntegrityError("Duplicate invite for email", None, Exception())
        self._invites[invite.id] = invite
        return invite

    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite."""
        return self._invites.pop(invite_id, None) is not None

    async def delete_by_chest(self, chest_id: ChestId) -> int:
        """Delete every invite on a chest."""
        doomed = [iid for iid, i in self._invites.items() if i.chest_id == chest_id]
        for iid in doomed:
            del self._invites[iid]
        return len(doomed)
