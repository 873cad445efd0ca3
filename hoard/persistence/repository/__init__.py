"""PostgreSQL repository implementations."""

from hoard.persistence.repository.chest import PostgresChestRepository
from hoard.persistence.repository.invite import PostgresInviteRepository
from hoard.persistence.repository.item import PostgresItemRepository
from hoard.persistence.repository.permission import PostgresPermissionRepository
from hoard.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresChestRepository",
    "PostgresPermissionRepository",
    "PostgresInviteRepository",
    "PostgresItemRepository",
]
