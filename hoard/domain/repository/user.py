"""User directory repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hoard.domain.model.user import User
from hoard.domain.value import UserId


class UserRepository(ABC):
    """Identities synced from the external identity provider.

    Emails are unique and compared exactly, without case folding.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, or None."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users at once.

        Args:
            user_ids: Identifiers to look up; duplicates are allowed

        Returns:
            Mapping of found user IDs to users; unknown IDs are absent
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by exact email, or None."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a user, or update the one with the same ID.

        Raises:
            IntegrityError: If another user already has the email
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user; unknown IDs are ignored."""
        pass
