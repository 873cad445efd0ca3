"""Unit tests for ChestService."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from hoard.domain.error import AccessDeniedError, NotFoundError
from hoard.domain.model import Item, Permission
from hoard.domain.repository import (
    InviteRepository,
    ItemRepository,
    PermissionRepository,
)
from hoard.domain.service import (
    ChestService,
    InviteService,
    PermissionService,
    UserService,
)
from hoard.domain.value import ChestId, ItemId, ItemType, PermissionId, Role
from tests.harness import create_env_fixture, make_chest, make_user

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def grant(env, chest_id, user_id, role: Role) -> None:
    permission_repo = await env.get(PermissionRepository)
    await permission_repo.add(
        Permission(
            id=PermissionId(uuid4()), chest_id=chest_id, user_id=user_id, role=role
        )
    )


class TestCreateChest:
    """Tests for create_chest method."""

    @pytest.mark.asyncio
    async def test_create_chest_writes_no_permission_row(self, unit_env):
        """The creator owns the chest through owner_id alone."""
        # Arrange
        chest_service = await unit_env.get(ChestService)
        permission_repo = await unit_env.get(PermissionRepository)
        permission_service = await unit_env.get(PermissionService)
        owner = await make_user(await unit_env.get(UserService), "alice@example.com")

        # Act
        chest = await chest_service.create_chest(owner.id, "Groceries", "Weekly run")

        # Assert
        assert chest.owner_id == owner.id
        assert chest.description == "Weekly run"
        assert await permission_repo.find_by_chest(chest.id) == []
        assert await permission_service.resolve(chest.id, owner.id) == Role.OWNER

    @pytest.mark.asyncio
    async def test_create_chest_rejects_empty_name(self, unit_env):
        """Chest names must not be empty."""
        chest_service = await unit_env.get(ChestService)
        owner = await make_user(await unit_env.get(UserService), "alice@example.com")

        with pytest.raises(PydanticValidationError):
            await chest_service.create_chest(owner.id, "")


class TestListChests:
    """Tests for list_chests method."""

    @pytest.mark.asyncio
    async def test_lists_owned_and_shared_with_stored_role(self, unit_env):
        """Shared chests carry the caller's stored role."""
        # Arrange
        chest_service = await unit_env.get(ChestService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        groceries = await make_chest(chest_service, alice, "Groceries")
        recipes = await make_chest(chest_service, bob, "Recipes")
        await grant(unit_env, groceries.id, bob.id, Role.EDITOR)

        # Act
        owned, shared = await chest_service.list_chests(bob.id)

        # Assert
        assert [chest.id for chest in owned] == [recipes.id]
        assert [(chest.id, role) for chest, role in shared] == [
            (groceries.id, Role.EDITOR)
        ]


class TestUpdateChest:
    """Tests for update_chest method."""

    @pytest.mark.asyncio
    async def test_admin_can_rename(self, unit_env):
        """Admins may rename; untouched fields keep their values."""
        # Arrange
        chest_service = await unit_env.get(ChestService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await chest_service.create_chest(alice.id, "Groceries", "Weekly run")
        await grant(unit_env, chest.id, bob.id, Role.ADMIN)

        # Act
        updated = await chest_service.update_chest(chest.id, bob.id, name="Food")

        # Assert
        assert updated.name == "Food"
        assert updated.description == "Weekly run"
        assert updated.owner_id == alice.id
        _, role = await chest_service.get_chest(chest.id, alice.id)
        assert role == Role.OWNER

    @pytest.mark.asyncio
    async def test_editor_cannot_rename(self, unit_env):
        """Editors lack the authority to edit chest metadata."""
        # Arrange
        chest_service = await unit_env.get(ChestService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(chest_service, alice)
        await grant(unit_env, chest.id, bob.id, Role.EDITOR)

        # Act & Assert
        with pytest.raises(AccessDeniedError):
            await chest_service.update_chest(chest.id, bob.id, name="Food")


class TestDeleteChest:
    """Tests for delete_chest method."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_children(self, unit_env):
        """Deleting a chest removes its permissions, invites and items."""
        # Arrange
        chest_service = await unit_env.get(ChestService)
        invite_service = await unit_env.get(InviteService)
        user_service = await unit_env.get(UserService)
        permission_repo = await unit_env.get(PermissionRepository)
        invite_repo = await unit_env.get(InviteRepository)
        item_repo = await unit_env.get(ItemRepository)

        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(chest_service, alice)
        await grant(unit_env, chest.id, bob.id, Role.EDITOR)
        await invite_service.create_invite(
            chest.id, alice.id, "carol@example.com", Role.VIEWER
        )
        await item_repo.save(
            Item(
                id=ItemId(uuid4()),
                chest_id=chest.id,
                type=ItemType.NOTE,
                created_by=alice.id,
                content="milk",
            )
        )

        # Act
        await chest_service.delete_chest(chest.id, alice.id)

        # Assert
        assert await permission_repo.find_by_chest(chest.id) == []
        assert await invite_repo.find_by_chest(chest.id) == []
        assert await item_repo.find_by_chest(chest.id) == []
        with pytest.raises(NotFoundError):
            await chest_service.get_chest(chest.id, alice.id)
        with pytest.raises(NotFoundError):
            await chest_service.get_chest(chest.id, bob.id)

    @pytest.mark.asyncio
    async def test_admin_cannot_delete(self, unit_env):
        """Only the literal owner may delete; chest, items and invites survive."""
        # Arrange
        chest_service = await unit_env.get(ChestService)
        invite_service = await unit_env.get(InviteService)
        user_service = await unit_env.get(UserService)
        permission_repo = await unit_env.get(PermissionRepository)
        invite_repo = await unit_env.get(InviteRepository)
        item_repo = await unit_env.get(ItemRepository)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(chest_service, alice)
        await grant(unit_env, chest.id, bob.id, Role.ADMIN)
        invite = await invite_service.create_invite(
            chest.id, alice.id, "carol@example.com", Role.VIEWER
        )
        item = await item_repo.save(
            Item(
                id=ItemId(uuid4()),
                chest_id=chest.id,
                type=ItemType.NOTE,
                created_by=alice.id,
                content="milk",
            )
        )

        # Act & Assert
        with pytest.raises(AccessDeniedError):
            await chest_service.delete_chest(chest.id, bob.id)

        loaded, _ = await chest_service.get_chest(chest.id, alice.id)
        assert loaded.id == chest.id
        assert len(await permission_repo.find_by_chest(chest.id)) == 1
        assert [i.id for i in await item_repo.find_by_chest(chest.id)] == [item.id]
        assert [i.id for i in await invite_repo.find_by_chest(chest.id)] == [
            invite.id
        ]

    @pytest.mark.asyncio
    async def test_delete_missing_chest_raises_not_found(self, unit_env):
        """Deleting a chest that does not exist is reported as not found."""
        chest_service = await unit_env.get(ChestService)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")

        with pytest.raises(NotFoundError):
            await chest_service.delete_chest(ChestId(uuid4()), alice.id)

    @pytest.mark.asyncio
    async def test_deleted_chest_rejects_new_children(self, unit_env):
        """Nothing can be attached to a chest once it is gone."""
        # Arrange
        chest_service = await unit_env.get(ChestService)
        invite_service = await unit_env.get(InviteService)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(chest_service, alice)
        await chest_service.delete_chest(chest.id, alice.id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await invite_service.create_invite(
                chest.id, alice.id, "bob@example.com", Role.VIEWER
            )
