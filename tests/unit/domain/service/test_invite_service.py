"""Unit tests for InviteService."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from hoard.domain.error import (
    AccessDeniedError,
    ConflictError,
    ExpiredError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from hoard.domain.model import Permission
from hoard.domain.repository import InviteRepository, PermissionRepository
from hoard.domain.service import (
    ChestService,
    CollaboratorService,
    InviteService,
    PermissionService,
    UserService,
)
from hoard.domain.value import InviteId, InviteToken, PermissionId, Role
from tests.harness import (
    create_env_fixture,
    lagging_invite_service,
    make_chest,
    make_user,
)

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

ISSUED_AT = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


class FakeClock:
    """Settable clock."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


async def invite_service_at(env, clock: FakeClock) -> InviteService:
    return InviteService(
        invite_repository=await env.get(InviteRepository),
        permission_repository=await env.get(PermissionRepository),
        permission_service=await env.get(PermissionService),
        clock=clock,
    )


class TestCreateInvite:
    """Tests for create_invite method."""

    @pytest.mark.asyncio
    async def test_create_invite_sets_fixed_expiry(self, unit_env):
        """Invites expire seven days after they are issued."""
        # Arrange
        clock = FakeClock(ISSUED_AT)
        invite_service = await invite_service_at(unit_env, clock)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)

        # Act
        invite = await invite_service.create_invite(
            chest.id, alice.id, "bob@example.com", Role.EDITOR
        )

        # Assert
        assert invite.expires_at == ISSUED_AT + timedelta(days=7)
        assert invite.role == Role.EDITOR
        assert invite.invited_by == alice.id
        assert invite.email == "bob@example.com"

    @pytest.mark.asyncio
    async def test_create_invite_does_not_grant_access(self, unit_env):
        """Access only appears once the invite is redeemed."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        permission_repo = await unit_env.get(PermissionRepository)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)

        # Act
        await invite_service.create_invite(
            chest.id, alice.id, "bob@example.com", Role.EDITOR
        )

        # Assert
        assert await permission_repo.find_by_chest(chest.id) == []

    @pytest.mark.asyncio
    async def test_tokens_are_long_and_unique(self, unit_env):
        """Tokens carry at least 128 bits and never repeat."""
        invite_service = await unit_env.get(InviteService)

        tokens = {invite_service.generate_token().root for _ in range(50)}

        assert len(tokens) == 50
        # 16 bytes of urlsafe base64 is 22 characters
        assert all(len(token) >= 22 for token in tokens)

    @pytest.mark.asyncio
    async def test_token_bytes_never_below_floor(self, unit_env):
        """A smaller configured size is raised to 16 bytes."""
        invite_service = InviteService(
            invite_repository=await unit_env.get(InviteRepository),
            permission_repository=await unit_env.get(PermissionRepository),
            permission_service=await unit_env.get(PermissionService),
            token_bytes=4,
        )

        assert len(invite_service.generate_token().root) >= 22

    @pytest.mark.asyncio
    async def test_owner_role_rejected(self, unit_env):
        """Ownership cannot be handed out through an invite."""
        invite_service = await unit_env.get(InviteService)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)

        with pytest.raises(ValidationError):
            await invite_service.create_invite(
                chest.id, alice.id, "bob@example.com", Role.OWNER
            )

    @pytest.mark.asyncio
    async def test_editor_cannot_invite(self, unit_env):
        """Inviting requires admin or above."""
        # Arrange
        clock = FakeClock(ISSUED_AT)
        invite_service = await invite_service_at(unit_env, clock)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.EDITOR
        )
        await invite_service.redeem_invite(invite.token, bob)

        # Act & Assert
        with pytest.raises(AccessDeniedError):
            await invite_service.create_invite(
                chest.id, bob.id, "carol@example.com", Role.VIEWER
            )

    @pytest.mark.asyncio
    async def test_duplicate_outstanding_invite_conflicts(self, unit_env):
        """A second invite for the same email is rejected while the first is live."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        await invite_service.create_invite(
            chest.id, alice.id, "bob@example.com", Role.EDITOR
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await invite_service.create_invite(
                chest.id, alice.id, "bob@example.com", Role.VIEWER
            )

    @pytest.mark.asyncio
    async def test_reinvite_after_expiry_replaces_old_invite(self, unit_env):
        """Once the old invite has expired, a new one can be issued."""
        # Arrange
        clock = FakeClock(ISSUED_AT)
        invite_service = await invite_service_at(unit_env, clock)
        invite_repo = await unit_env.get(InviteRepository)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        first = await invite_service.create_invite(
            chest.id, alice.id, "bob@example.com", Role.EDITOR
        )
        clock.advance(timedelta(days=8))

        # Act
        second = await invite_service.create_invite(
            chest.id, alice.id, "bob@example.com", Role.VIEWER
        )

        # Assert
        assert await invite_repo.find_by_token(first.token) is None
        assert await invite_repo.find_by_token(second.token) == second
        assert second.expires_at == clock.now + timedelta(days=7)

    @pytest.mark.asyncio
    async def test_reinvite_after_redeem_succeeds(self, unit_env):
        """Redeeming consumes the invite, so the pair is free again."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.EDITOR
        )
        await invite_service.redeem_invite(invite.token, bob)

        # Act
        again = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.ADMIN
        )

        # Assert
        assert again.token != invite.token


class TestRedeemInvite:
    """Tests for redeem_invite method."""

    @pytest.mark.asyncio
    async def test_redeem_grants_role_and_consumes_invite(self, unit_env):
        """Redeeming writes the permission and deletes the invite."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        permission_service = await unit_env.get(PermissionService)
        invite_repo = await unit_env.get(InviteRepository)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.EDITOR
        )

        # Act
        chest_id = await invite_service.redeem_invite(invite.token, bob)

        # Assert
        assert chest_id == chest.id
        assert await permission_service.resolve(chest.id, bob.id) == Role.EDITOR
        assert await invite_repo.find_by_token(invite.token) is None

    @pytest.mark.asyncio
    async def test_redeem_twice_fails(self, unit_env):
        """A consumed token is unknown the second time."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.EDITOR
        )
        await invite_service.redeem_invite(invite.token, bob)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await invite_service.redeem_invite(invite.token, bob)

    @pytest.mark.asyncio
    async def test_simultaneous_redemptions_grant_once(self, unit_env):
        """Of two redemptions racing on one token, exactly one succeeds."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        permission_repo = await unit_env.get(PermissionRepository)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.EDITOR
        )

        # Act
        results = await asyncio.gather(
            invite_service.redeem_invite(invite.token, bob),
            invite_service.redeem_invite(invite.token, bob),
            return_exceptions=True,
        )

        # Assert
        successes = [r for r in results if not isinstance(r, Exception)]
        failures = [r for r in results if isinstance(r, Exception)]
        assert successes == [chest.id]
        assert len(failures) == 1
        assert isinstance(failures[0], (NotFoundError, ConflictError))
        permissions = await permission_repo.find_by_chest(chest.id)
        assert [(p.user_id, p.role) for p in permissions] == [(bob.id, Role.EDITOR)]

    @pytest.mark.asyncio
    async def test_duplicate_caught_by_store_is_conflict(self, unit_env):
        """A permission row the access check missed is still a conflict."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        permission_repo = await unit_env.get(PermissionRepository)
        invite_repo = await unit_env.get(InviteRepository)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.EDITOR
        )
        await permission_repo.add(
            Permission(
                id=PermissionId(uuid4()),
                chest_id=chest.id,
                user_id=bob.id,
                role=Role.VIEWER,
            )
        )
        lagging = await lagging_invite_service(unit_env)

        # Act & Assert
        with pytest.raises(ConflictError):
            await lagging.redeem_invite(invite.token, bob)

        permissions = await permission_repo.find_by_chest(chest.id)
        assert [(p.user_id, p.role) for p in permissions] == [(bob.id, Role.VIEWER)]
        assert await invite_repo.find_by_token(invite.token) is not None

    @pytest.mark.asyncio
    async def test_unknown_token_not_found(self, unit_env):
        """A token that was never issued is not found."""
        invite_service = await unit_env.get(InviteService)
        bob = await make_user(await unit_env.get(UserService), "bob@example.com")

        with pytest.raises(NotFoundError):
            await invite_service.redeem_invite(InviteToken(root="no-such-token"), bob)

    @pytest.mark.asyncio
    async def test_redeem_after_expiry_has_no_side_effects(self, unit_env):
        """Eight days later the invite is expired and nothing changes."""
        # Arrange
        clock = FakeClock(ISSUED_AT)
        invite_service = await invite_service_at(unit_env, clock)
        permission_service = await unit_env.get(PermissionService)
        invite_repo = await unit_env.get(InviteRepository)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.EDITOR
        )
        clock.advance(timedelta(days=8))

        # Act & Assert
        with pytest.raises(ExpiredError):
            await invite_service.redeem_invite(invite.token, bob)

        assert await permission_service.resolve(chest.id, bob.id) is None
        assert await invite_repo.find_by_token(invite.token) == invite

    @pytest.mark.asyncio
    async def test_redeem_at_expiry_instant_succeeds(self, unit_env):
        """An invite is still valid at exactly its expiry time."""
        # Arrange
        clock = FakeClock(ISSUED_AT)
        invite_service = await invite_service_at(unit_env, clock)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.VIEWER
        )
        clock.now = invite.expires_at

        # Act
        chest_id = await invite_service.redeem_invite(invite.token, bob)

        # Assert
        assert chest_id == chest.id

    @pytest.mark.asyncio
    async def test_redeem_by_other_email_forbidden(self, unit_env):
        """Only the addressed identity can redeem; the invite survives."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        permission_service = await unit_env.get(PermissionService)
        invite_repo = await unit_env.get(InviteRepository)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        carol = await make_user(user_service, "carol@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, "bob@example.com", Role.EDITOR
        )

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await invite_service.redeem_invite(invite.token, carol)

        assert await permission_service.resolve(chest.id, carol.id) is None
        assert await invite_repo.find_by_token(invite.token) is not None

    @pytest.mark.asyncio
    async def test_email_match_is_case_sensitive(self, unit_env):
        """Emails differing only in case do not match."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, "Bob@example.com", Role.EDITOR
        )

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await invite_service.redeem_invite(invite.token, bob)

    @pytest.mark.asyncio
    async def test_existing_collaborator_conflicts(self, unit_env):
        """A user who already has access cannot redeem another invite."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        permission_service = await unit_env.get(PermissionService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        first = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.VIEWER
        )
        await invite_service.redeem_invite(first.token, bob)
        second = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.ADMIN
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await invite_service.redeem_invite(second.token, bob)

        assert await permission_service.resolve(chest.id, bob.id) == Role.VIEWER

    @pytest.mark.asyncio
    async def test_owner_redeeming_own_chest_invite_conflicts(self, unit_env):
        """The owner already holds the highest role."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        permission_repo = await unit_env.get(PermissionRepository)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, alice.email, Role.EDITOR
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await invite_service.redeem_invite(invite.token, alice)

        assert await permission_repo.find_by_chest(chest.id) == []


class TestPendingInvites:
    """Tests for list_pending and revoke_invite methods."""

    @pytest.mark.asyncio
    async def test_list_pending_skips_expired(self, unit_env):
        """Expired invites are not outstanding."""
        # Arrange
        clock = FakeClock(ISSUED_AT)
        invite_service = await invite_service_at(unit_env, clock)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        await invite_service.create_invite(
            chest.id, alice.id, "old@example.com", Role.VIEWER
        )
        clock.advance(timedelta(days=5))
        fresh = await invite_service.create_invite(
            chest.id, alice.id, "new@example.com", Role.EDITOR
        )
        clock.advance(timedelta(days=3))

        # Act
        pending = await invite_service.list_pending(chest.id, alice.id)

        # Assert
        assert [invite.id for invite in pending] == [fresh.id]

    @pytest.mark.asyncio
    async def test_revoke_deletes_invite(self, unit_env):
        """A revoked invite can no longer be redeemed."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com")
        bob = await make_user(user_service, "bob@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)
        invite = await invite_service.create_invite(
            chest.id, alice.id, bob.email, Role.EDITOR
        )

        # Act
        await invite_service.revoke_invite(chest.id, alice.id, invite.id)

        # Assert
        with pytest.raises(NotFoundError):
            await invite_service.redeem_invite(invite.token, bob)

    @pytest.mark.asyncio
    async def test_revoke_unknown_invite_is_noop(self, unit_env):
        """Revoking an invite that does not exist changes nothing."""
        invite_service = await unit_env.get(InviteService)
        alice = await make_user(await unit_env.get(UserService), "alice@example.com")
        chest = await make_chest(await unit_env.get(ChestService), alice)

        await invite_service.revoke_invite(chest.id, alice.id, InviteId(uuid4()))

        assert await invite_service.list_pending(chest.id, alice.id) == []


class TestGroceriesWalkthrough:
    """Alice shares a chest with Bob, then takes access away again."""

    @pytest.mark.asyncio
    async def test_invite_redeem_remove(self, unit_env):
        # Arrange
        invite_service = await unit_env.get(InviteService)
        permission_service = await unit_env.get(PermissionService)
        collaborator_service = await unit_env.get(CollaboratorService)
        user_service = await unit_env.get(UserService)
        alice = await make_user(user_service, "alice@example.com", "Alice")
        bob = await make_user(user_service, "bob@example.com", "Bob")
        chest = await make_chest(await unit_env.get(ChestService), alice, "Groceries")

        # Act - share
        invite = await invite_service.create_invite(
            chest.id, alice.id, "bob@example.com", Role.EDITOR
        )
        await invite_service.redeem_invite(invite.token, bob)

        # Assert - shared
        assert await permission_service.resolve(chest.id, bob.id) == Role.EDITOR

        # Act - unshare
        removed = await collaborator_service.remove_collaborator(
            chest.id, alice.id, bob.id
        )

        # Assert - gone
        assert removed is True
        assert await permission_service.resolve(chest.id, bob.id) is None
