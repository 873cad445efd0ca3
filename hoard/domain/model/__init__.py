"""Domain model entities for Hoard."""

from hoard.domain.model.chest import Chest
from hoard.domain.model.invite import Invite
from hoard.domain.model.item import Item
from hoard.domain.model.permission import Permission
from hoard.domain.model.user import User

__all__ = [
    "User",
    "Chest",
    "Permission",
    "Invite",
    "Item",
]
