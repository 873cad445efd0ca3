"""User directory domain service."""

import logfire

from hoard.domain.error import NotFoundError
from hoard.domain.model import User
from hoard.domain.repository import UserRepository
from hoard.domain.value import UserId

from .base import Service


class UserService(Service):
    """Read access to the identities the identity provider has synced.

    The directory is how a token's user id becomes a verified email, and how
    a collaborator's id becomes a name to show. `register` and `remove` exist
    for the sync job and for seeding tests.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User directory repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Look up a user who must exist.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If the directory has no such user
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not in directory", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(self, user: User) -> User:
        """Add a user to the directory or refresh their email and name.

        Raises:
            IntegrityError: If another user already has the email
        """
        with logfire.span("user_service.register", user_id=str(user.id)):
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def remove(self, user_id: UserId) -> None:
        """Drop a user from the directory.

        Their permission rows stay; the collaborator listing skips them.
        """
        with logfire.span("user_service.remove", user_id=str(user_id)):
            await self.user_repository.delete(user_id)
            logfire.info("User removed", user_id=str(user_id))
