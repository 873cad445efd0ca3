"""In-memory repository implementations for testing."""

from .chest import InMemoryChestRepository
from .database import InMemoryDatabase
from .invite import InMemoryInviteRepository
from .item import InMemoryItemRepository
from .permission import InMemoryPermissionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryChestRepository",
    "InMemoryInviteRepository",
    "InMemoryItemRepository",
    "InMemoryPermissionRepository",
    "InMemoryUserRepository",
]
