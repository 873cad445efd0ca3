"""Unit tests for PermissionService."""

from uuid import uuid4

import pytest

from hoard.domain.error import AccessDeniedError, NotFoundError
from hoard.domain.model import Permission
from hoard.domain.repository import PermissionRepository
from hoard.domain.service import ChestService, PermissionService, UserService
from hoard.domain.value import ChestId, PermissionId, Role, UserId
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


class TestResolve:
    """Tests for resolve method."""

    @pytest.mark.asyncio
    async def test_owner_resolves_to_owner(self, unit_env):
        """The chest owner resolves to owner without any permission row."""
        # Arrange
        permission_service = await unit_env.get(PermissionService)
        owner = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), owner)

        # Act
        role = await permission_service.resolve(chest.id, owner.id)

        # Assert
        assert role == Role.OWNER

    @pytest.mark.asyncio
    async def test_stray_row_never_overrides_owner(self, unit_env):
        """A permission row for the owner is ignored by the resolver."""
        # Arrange
        permission_service = await unit_env.get(PermissionService)
        owner = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), owner)
        await grant(unit_env, chest.id, owner.id, Role.VIEWER)

        # Act
        role = await permission_service.resolve(chest.id, owner.id)

        # Assert
        assert role == Role.OWNER

    @pytest.mark.asyncio
    async def test_collaborator_resolves_to_stored_role(self, unit_env):
        """A collaborator resolves to the role stored on their row."""
        # Arrange
        permission_service = await unit_env.get(PermissionService)
        user_service = await unit_env.get(UserService)
        owner = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), owner)
        await grant(unit_env, chest.id, bob.id, Role.EDITOR)

        # Act
        role = await permission_service.resolve(chest.id, bob.id)

        # Assert
        assert role == Role.EDITOR

    @pytest.mark.asyncio
    async def test_stranger_resolves_to_none(self, unit_env):
        """A user with no row and no ownership has no access."""
        # Arrange
        permission_service = await unit_env.get(PermissionService)
        owner = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), owner)

        # Act
        role = await permission_service.resolve(chest.id, UserId(uuid4()))

        # Assert
        assert role is None

    @pytest.mark.asyncio
    async def test_missing_chest_resolves_to_none(self, unit_env):
        """Resolving against a chest that does not exist returns None."""
        permission_service = await unit_env.get(PermissionService)

        role = await permission_service.resolve(ChestId(uuid4()), UserId(uuid4()))

        assert role is None


class TestRequire:
    """Tests for require method."""

    @pytest.mark.asyncio
    async def test_require_returns_chest_and_role(self, unit_env):
        """Meeting the minimum returns the chest and the resolved role."""
        # Arrange
        permission_service = await unit_env.get(PermissionService)
        user_service = await unit_env.get(UserService)
        owner = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), owner)
        await grant(unit_env, chest.id, bob.id, Role.ADMIN)

        # Act
        loaded, role = await permission_service.require(
            chest.id, bob.id, Role.EDITOR, "edit"
        )

        # Assert
        assert loaded.id == chest.id
        assert role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_require_rejects_lower_role(self, unit_env):
        """A viewer does not satisfy an editor requirement."""
        # Arrange
        permission_service = await unit_env.get(PermissionService)
        user_service = await unit_env.get(UserService)
        owner = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), owner)
        await grant(unit_env, chest.id, bob.id, Role.VIEWER)

        # Act & Assert
        with pytest.raises(AccessDeniedError):
            await permission_service.require(chest.id, bob.id, Role.EDITOR, "edit")

    @pytest.mark.asyncio
    async def test_require_rejects_stranger(self, unit_env):
        """No access at all is denied."""
        permission_service = await unit_env.get(PermissionService)
        owner = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), owner)

        with pytest.raises(AccessDeniedError):
            await permission_service.require(
                chest.id, UserId(uuid4()), Role.VIEWER, "view"
            )

    @pytest.mark.asyncio
    async def test_require_missing_chest_raises_not_found(self, unit_env):
        """A missing chest is reported as not found, not as denied."""
        permission_service = await unit_env.get(PermissionService)

        with pytest.raises(NotFoundError):
            await permission_service.require(
                ChestId(uuid4()), UserId(uuid4()), Role.VIEWER, "view"
            )
