"""Strongly typed identifiers for Hoard domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
ChestId = NewType("ChestId", UUID)
PermissionId = NewType("PermissionId", UUID)
InviteId = NewType("InviteId", UUID)
ItemId = NewType("ItemId", UUID)
