"""Permission resolver domain service."""

import logfire

from hoard.domain.error import AccessDeniedError, NotFoundError
from hoard.domain.model import Chest
from hoard.domain.repository import ChestRepository, PermissionRepository
from hoard.domain.value import ChestId, Role, UserId

from .base import Service


class PermissionService(Service):
    """Resolves a user's effective role on a chest.

    Every chest and item operation goes through this service before acting.
    Ownership is checked against the chest itself and short-circuits the
    permission table, so a stray permission row can never demote the owner.
    """

    def __init__(
        self,
        chest_repository: ChestRepository,
        permission_repository: PermissionRepository,
    ) -> None:
        """Initialize permission service.

        Args:
            chest_repository: Chest repository
            permission_repository: Permission repository
        """
        self.chest_repository = chest_repository
        self.permission_repository = permission_repository

    async def resolve(self, chest_id: ChestId, user_id: UserId) -> Role | None:
        """Resolve the role a user holds on a chest.

        Never raises for lack of access: absence of access (or of the chest)
        is reported as None and callers decide what that means.

        Args:
            chest_id: Chest ID
            user_id: User ID

        Returns:
            The user's role, or None if the user has no access
        """
        chest = await self.chest_repository.find_by_id(chest_id)
        if chest is None:
            return None
        return await self.resolve_for(chest, user_id)

    async def resolve_for(self, chest: Chest, user_id: UserId) -> Role | None:
        """Resolve a user's role on an already loaded chest.

        Args:
            chest: Chest to check
            user_id: User ID

        Returns:
            The user's role, or None if the user has no access
        """
        if chest.is_owned_by(user_id):
            return Role.OWNER

        permission = await self.permission_repository.find(chest.id, user_id)
        return permission.role if permission else None

    async def require(
        self,
        chest_id: ChestId,
        user_id: UserId,
        minimum: Role,
        action: str,
        for_update: bool = False,
    ) -> tuple[Chest, Role]:
        """Load a chest and check the user holds at least `minimum` on it.

        Args:
            chest_id: Chest ID
            user_id: User ID
            minimum: Least role the operation needs
            action: Human-readable operation name for the error message
            for_update: Lock the chest row for the rest of the transaction

        Returns:
            Tuple of (chest, resolved role)

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the user's role is missing or too low
        """
        with logfire.span(
            "permission_service.require",
            chest_id=str(chest_id),
            user_id=str(user_id),
            minimum=minimum.value,
        ):
            chest = await self.chest_repository.find_by_id(
                chest_id, for_update=for_update
            )
            if chest is None:
                logfire.warn("Chest not found", chest_id=str(chest_id))
                raise NotFoundError("Chest", str(chest_id))

            role = await self.resolve_for(chest, user_id)
            if role is None or not role.at_least(minimum):
                logfire.warn(
                    "Access denied",
                    chest_id=str(chest_id),
                    user_id=str(user_id),
                    role=role.value if role else None,
                    minimum=minimum.value,
                )
                raise AccessDeniedError(action, str(chest_id), str(user_id))

            return chest, role
