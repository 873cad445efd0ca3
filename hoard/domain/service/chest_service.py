"""Chest lifecycle domain service."""

from uuid import uuid4

import logfire

from hoard.domain.error import AccessDeniedError, NotFoundError
from hoard.domain.model import Chest
from hoard.domain.repository import (
    ChestRepository,
    InviteRepository,
    ItemRepository,
    PermissionRepository,
)
from hoard.domain.value import ChestId, Role, UserId

from .base import Service
from .permission_service import PermissionService


class ChestService(Service):
    """Domain service for creating, editing and deleting chests."""

    def __init__(
        self,
        chest_repository: ChestRepository,
        permission_repository: PermissionRepository,
        invite_repository: InviteRepository,
        item_repository: ItemRepository,
        permission_service: PermissionService,
    ) -> None:
        """Initialize chest service.

        Args:
            chest_repository: Chest repository
            permission_repository: Permission repository
            invite_repository: Invite repository
            item_repository: Item repository
            permission_service: Permission resolver
        """
        self.chest_repository = chest_repository
        self.permission_repository = permission_repository
        self.invite_repository = invite_repository
        self.item_repository = item_repository
        self.permission_service = permission_service

    async def create_chest(
        self, owner_id: UserId, name: str, description: str | None = None
    ) -> Chest:
        """Create a chest owned by the caller.

        No permission row is written; ownership comes from `owner_id`.

        Args:
            owner_id: Authenticated caller, becomes the owner
            name: Chest name
            description: Optional description

        Returns:
            Created chest
        """
        with logfire.span(
            "chest_service.create_chest", owner_id=str(owner_id), name=name
        ):
            chest = Chest(
                id=ChestId(uuid4()),
                name=name,
                owner_id=owner_id,
                description=description,
            )
            saved = await self.chest_repository.save(chest)
            logfire.info(
                "Chest created", chest_id=str(saved.id), owner_id=str(owner_id)
            )
            return saved

    async def get_chest(
        self, chest_id: ChestId, caller_id: UserId
    ) -> tuple[Chest, Role]:
        """Get a chest together with the caller's role on it.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller

        Returns:
            Tuple of (chest, caller role)

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller has no role on the chest
        """
        return await self.permission_service.require(
            chest_id, caller_id, Role.VIEWER, "view the chest"
        )

    async def list_chests(
        self, user_id: UserId
    ) -> tuple[list[Chest], list[tuple[Chest, Role]]]:
        """List chests a user owns and chests shared with them.

        Args:
            user_id: User ID

        Returns:
            Tuple of (owned chests, [(shared chest, stored role)])
        """
        with logfire.span("chest_service.list_chests", user_id=str(user_id)):
            owned = await self.chest_repository.find_by_owner(user_id)

            permissions = await self.permission_repository.find_by_user(user_id)
            roles = {permission.chest_id: permission.role for permission in permissions}
            chests = await self.chest_repository.find_by_ids(list(roles))
            shared = [
                (chest, roles[chest.id])
                for chest in chests
                if not chest.is_owned_by(user_id)
            ]

            logfire.info(
                "Chests listed",
                user_id=str(user_id),
                owned=len(owned),
                shared=len(shared),
            )
            return owned, shared

    async def update_chest(
        self,
        chest_id: ChestId,
        caller_id: UserId,
        name: str | None = None,
        description: str | None = None,
    ) -> Chest:
        """Rename and/or describe a chest.

        Only supplied fields change; None leaves a field as it is.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller (owner or admin)
            name: New name
            description: New description

        Returns:
            Updated chest

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is neither owner nor admin
        """
        with logfire.span(
            "chest_service.update_chest",
            chest_id=str(chest_id),
            caller_id=str(caller_id),
        ):
            chest, _ = await self.permission_service.require(
                chest_id, caller_id, Role.ADMIN, "edit the chest"
            )

            updates: dict[str, object] = {}
            if name is not None:
                updates["name"] = name
            if description is not None:
                updates["description"] = description

            if not updates:
                return chest

            # model_copy skips validation, so rebuild to enforce field limits
            updated = Chest.model_validate({**chest.model_dump(), **updates})
            saved = await self.chest_repository.save(updated)
            logfire.info(
                "Chest updated", chest_id=str(chest_id), fields=sorted(updates)
            )
            return saved

    async def delete_chest(self, chest_id: ChestId, caller_id: UserId) -> None:
        """Delete a chest and everything scoped to it.

        Only the literal owner may delete; admin rights are not enough.
        Permissions, invites and items are deleted before the chest itself,
        all inside the caller's transaction. The chest row is locked first so
        concurrent child inserts on the same chest serialize behind the delete.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller (must be the owner)

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is not the owner
        """
        with logfire.span(
            "chest_service.delete_chest",
            chest_id=str(chest_id),
            caller_id=str(caller_id),
        ):
            chest = await self.chest_repository.find_by_id(chest_id, for_update=True)
            if chest is None:
                logfire.warn("Chest not found for deletion", chest_id=str(chest_id))
                raise NotFoundError("Chest", str(chest_id))

            if not chest.is_owned_by(caller_id):
                logfire.warn(
                    "Non-owner attempted chest deletion",
                    chest_id=str(chest_id),
                    caller_id=str(caller_id),
                )
                raise AccessDeniedError(
                    "delete the chest", str(chest_id), str(caller_id)
                )

            permissions = await self.permission_repository.delete_by_chest(chest_id)
            invites = await self.invite_repository.delete_by_chest(chest_id)
            items = await self.item_repository.delete_by_chest(chest_id)
            await self.chest_repository.delete(chest_id)

            logfire.info(
                "Chest deleted",
                chest_id=str(chest_id),
                permissions=permissions,
                invites=invites,
                items=items,
            )
