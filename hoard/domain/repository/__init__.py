"""Repository interfaces for Hoard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from hoard.domain.repository.chest import ChestRepository
from hoard.domain.repository.invite import InviteRepository
from hoard.domain.repository.item import ItemRepository
from hoard.domain.repository.permission import PermissionRepository
from hoard.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ChestRepository",
    "PermissionRepository",
    "InviteRepository",
    "ItemRepository",
]
