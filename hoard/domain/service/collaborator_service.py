"""Collaborator directory domain service."""

from dataclasses import dataclass

import logfire

from hoard.domain.repository import PermissionRepository, UserRepository
from hoard.domain.value import ChestId, Role, UserId

from .base import Service
from .permission_service import PermissionService


@dataclass
class Collaborator:
    """Public identity of a user together with their role on a chest."""

    user_id: UserId
    email: str | None
    name: str | None
    role: Role


@dataclass
class Collaborators:
    """Owner and collaborators of a chest."""

    owner: Collaborator
    collaborators: list[Collaborator]


class CollaboratorService(Service):
    """Domain service for reading and pruning the people a chest is shared with."""

    def __init__(
        self,
        permission_repository: PermissionRepository,
        user_repository: UserRepository,
        permission_service: PermissionService,
    ) -> None:
        """Initialize collaborator service.

        Args:
            permission_repository: Permission repository
            user_repository: User directory
            permission_service: Permission resolver
        """
        self.permission_repository = permission_repository
        self.user_repository = user_repository
        self.permission_service = permission_service

    async def list_collaborators(
        self, chest_id: ChestId, caller_id: UserId
    ) -> Collaborators:
        """List the owner and collaborators of a chest.

        Collaborators whose user record no longer exists are left out.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller (any role)

        Returns:
            Owner and collaborators with their roles

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller has no role on the chest
        """
        with logfire.span(
            "collaborator_service.list_collaborators",
            chest_id=str(chest_id),
            caller_id=str(caller_id),
        ):
            chest, _ = await self.permission_service.require(
                chest_id, caller_id, Role.VIEWER, "view collaborators"
            )

            permissions = await self.permission_repository.find_by_chest(chest_id)
            users = await self.user_repository.find_by_ids(
                [chest.owner_id, *(permission.user_id for permission in permissions)]
            )

            owner_user = users.get(chest.owner_id)
            owner = Collaborator(
                user_id=chest.owner_id,
                email=owner_user.email if owner_user else None,
                name=owner_user.name if owner_user else None,
                role=Role.OWNER,
            )

            collaborators = []
            for permission in permissions:
                user = users.get(permission.user_id)
                if user is None:
                    logfire.warn(
                        "Collaborator user missing",
                        chest_id=str(chest_id),
                        user_id=str(permission.user_id),
                    )
                    continue
                collaborators.append(
                    Collaborator(
                        user_id=user.id,
                        email=user.email,
                        name=user.name,
                        role=permission.role,
                    )
                )

            logfire.info(
                "Collaborators listed",
                chest_id=str(chest_id),
                count=len(collaborators),
            )
            return Collaborators(owner=owner, collaborators=collaborators)

    async def remove_collaborator(
        self, chest_id: ChestId, caller_id: UserId, target_user_id: UserId
    ) -> bool:
        """Remove a collaborator's permission on a chest.

        Removing someone without a permission row is a no-op. That includes
        the owner, who never has a row, so ownership cannot be revoked here.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller (owner or admin)
            target_user_id: Collaborator to remove

        Returns:
            True if a permission was removed, False if there was none

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is neither owner nor admin
        """
        with logfire.span(
            "collaborator_service.remove_collaborator",
            chest_id=str(chest_id),
            caller_id=str(caller_id),
            target_user_id=str(target_user_id),
        ):
            await self.permission_service.require(
                chest_id, caller_id, Role.ADMIN, "remove collaborators"
            )
            removed = await self.permission_repository.delete(chest_id, target_user_id)
            if removed:
                logfire.info(
                    "Collaborator removed",
                    chest_id=str(chest_id),
                    user_id=str(target_user_id),
                )
            else:
                logfire.info(
                    "No permission to remove",
                    chest_id=str(chest_id),
                    user_id=str(target_user_id),
                )
            return removed
