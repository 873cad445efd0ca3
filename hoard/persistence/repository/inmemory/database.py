"""Shared in-memory tables for the in-memory repositories."""

from dataclasses import dataclass, field

from sqlalchemy.exc import IntegrityError

from hoard.domain.model import Chest, Invite, Item, Permission, User
from hoard.domain.value import ChestId, InviteId, ItemId, PermissionId, UserId


@dataclass
class InMemoryDatabase:
    """Tables shared by every in-memory repository of one container.

    Repositories are request-scoped but read and write these dicts, so state
    survives across requests the way rows survive across sessions.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    chests: dict[ChestId, Chest] = field(default_factory=dict)
    permissions: dict[PermissionId, Permission] = field(default_factory=dict)
    invites: dict[InviteId, Invite] = field(default_factory=dict)
    items: dict[ItemId, Item] = field(default_factory=dict)

    def require_chest(self, chest_id: ChestId) -> None:
        """Mirror the chest foreign key on child tables.

        Raises:
            IntegrityError: If the chest does not exist
        """
        if chest_id not in self.chests:
            raise IntegrityError("Chest does not exist", None, Exception())
