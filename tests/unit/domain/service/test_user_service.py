"""Unit tests for UserService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from hoard.domain.error import NotFoundError
from hoard.domain.model import User
from hoard.domain.service import UserService
from hoard.domain.value import UserId
from tests.harness import create_env_fixture, make_user

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestUserDirectory:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com", "Alice")

        found = await user_service.get_by_id(alice.id)

        assert found.email == "alice@example.com"
        assert found.name == "Alice"

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_emails_differing_in_case_are_distinct(self, unit_env):
        """Emails are matched exactly, so case variants are separate users."""
        user_service = await unit_env.get(UserService)
        lower = await make_user(user_service, "alice@example.com")

        upper = await make_user(user_service, "Alice@example.com")

        assert (await user_service.get_by_id(lower.id)).email == "alice@example.com"
        assert (await user_service.get_by_id(upper.id)).email == "Alice@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "alice@example.com")

        with pytest.raises(IntegrityError):
            await user_service.register(
                User(id=UserId(uuid4()), email="alice@example.com")
            )

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")

        await user_service.remove(alice.id)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(alice.id)
