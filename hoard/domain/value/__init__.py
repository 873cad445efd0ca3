"""Domain value objects for Hoard."""

from hoard.domain.value.identifiers import (
    ChestId,
    InviteId,
    ItemId,
    PermissionId,
    UserId,
)
from hoard.domain.value.types import InviteToken, ItemType, Role, Tag

__all__ = [
    # Identifiers
    "UserId",
    "ChestId",
    "PermissionId",
    "InviteId",
    "ItemId",
    # Types
    "Role",
    "ItemType",
    "InviteToken",
    "Tag",
]
