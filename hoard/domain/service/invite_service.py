"""Invite domain service."""

import secrets
from datetime import timedelta
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from hoard.domain.error import (
    ConflictError,
    ExpiredError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from hoard.domain.model import Invite, Permission, User
from hoard.domain.repository import InviteRepository, PermissionRepository
from hoard.domain.value import (
    ChestId,
    InviteId,
    InviteToken,
    PermissionId,
    Role,
    UserId,
)
from hoard.util.clock import Clock, utcnow

from .base import Service
from .permission_service import PermissionService

# 16 bytes = 128 bits, the least entropy an invite token may carry
MIN_TOKEN_BYTES = 16


class InviteService(Service):
    """Domain service for issuing and redeeming chest invites.

    Issuing an invite does not touch permissions. The invitee proves their
    identity when redeeming the token, and only then is a permission written.
    """

    def __init__(
        self,
        invite_repository: InviteRepository,
        permission_repository: PermissionRepository,
        permission_service: PermissionService,
        expiry_days: int = 7,
        token_bytes: int = 32,
        clock: Clock = utcnow,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            permission_repository: Permission repository
            permission_service: Permission resolver
            expiry_days: Lifetime of an invite from issuance
            token_bytes: Random bytes per token (at least 16)
            clock: Source of the current time
        """
        self.invite_repository = invite_repository
        self.permission_repository = permission_repository
        self.permission_service = permission_service
        self.expiry = timedelta(days=expiry_days)
        self.token_bytes = max(token_bytes, MIN_TOKEN_BYTES)
        self.clock = clock

    def generate_token(self) -> InviteToken:
        """Generate an unpredictable URL-safe token."""
        return InviteToken(root=secrets.token_urlsafe(self.token_bytes))

    async def create_invite(
        self, chest_id: ChestId, caller_id: UserId, email: str, role: Role
    ) -> Invite:
        """Invite an email address to a chest.

        Args:
            chest_id: Chest to share
            caller_id: Authenticated caller (owner or admin)
            email: Invitee email
            role: Role to grant on redemption (admin, editor or viewer)

        Returns:
            Created invite

        Raises:
            ValidationError: If the role is not grantable
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is neither owner nor admin
            ConflictError: If an outstanding invite exists for the email
        """
        with logfire.span(
            "invite_service.create_invite",
            chest_id=str(chest_id),
            caller_id=str(caller_id),
            email=email,
            role=role.value,
        ):
            if not role.is_grantable:
                raise ValidationError("Owner role cannot be granted by invite")

            await self.permission_service.require(
                chest_id, caller_id, Role.ADMIN, "invite collaborators"
            )

            now = self.clock()
            existing = await self.invite_repository.find_by_chest_and_email(
                chest_id, email
            )
            if existing and not existing.is_expired(now):
                logfire.warn(
                    "Invite already exists", chest_id=str(chest_id), email=email
                )
                raise ConflictError(f"User already invited: {email}")
            if existing:
                # Expired invites are never swept; clear the stale one for this pair
                await self.invite_repository.delete(existing.id)
                logfire.info(
                    "Expired invite purged",
                    invite_id=str(existing.id),
                    chest_id=str(chest_id),
                )

            invite = Invite(
                id=InviteId(uuid4()),
                chest_id=chest_id,
                email=email,
                role=role,
                invited_by=caller_id,
                token=self.generate_token(),
                expires_at=now + self.expiry,
                created_at=now,
            )

            try:
                saved = await self.invite_repository.add(invite)
            except IntegrityError:
                logfire.warn(
                    "Concurrent invite detected", chest_id=str(chest_id), email=email
                )
                raise ConflictError(f"User already invited: {email}")

            logfire.info(
                "Invite created",
                invite_id=str(saved.id),
                chest_id=str(chest_id),
                email=email,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def redeem_invite(self, token: InviteToken, caller: User) -> ChestId:
        """Redeem an invite token into a permission for the caller.

        The invite row is locked while it is checked, the permission is
        inserted and the invite is deleted, so two redemptions of the same
        token cannot both succeed.

        Args:
            token: Invite token
            caller: Authenticated caller with their verified email

        Returns:
            ID of the chest the caller now has access to

        Raises:
            NotFoundError: If no invite has this token
            ExpiredError: If the invite has expired
            ForbiddenError: If the invite is addressed to another email
            ConflictError: If the caller already has access to the chest
        """
        with logfire.span(
            "invite_service.redeem_invite",
            token=token.redacted,
            caller_id=str(caller.id),
        ):
            invite = await self.invite_repository.find_by_token(token, for_update=True)
            if invite is None:
                logfire.warn("Invite not found", token=token.redacted)
                raise NotFoundError("Invite", token.redacted)

            if invite.is_expired(self.clock()):
                logfire.warn(
                    "Expired invite redeemed",
                    invite_id=str(invite.id),
                    expires_at=invite.expires_at.isoformat(),
                )
                raise ExpiredError("Invite", token.redacted)

            if invite.email != caller.email:
                logfire.warn(
                    "Invite redeemed by another identity",
                    invite_id=str(invite.id),
                    caller_id=str(caller.id),
                )
                raise ForbiddenError(str(invite.chest_id), str(caller.id))

            role = await self.permission_service.resolve(invite.chest_id, caller.id)
            if role is not None:
                logfire.warn(
                    "Caller already has access",
                    chest_id=str(invite.chest_id),
                    caller_id=str(caller.id),
                    role=role.value,
                )
                raise ConflictError("User already has access to this chest")

            permission = Permission(
                id=PermissionId(uuid4()),
                chest_id=invite.chest_id,
                user_id=caller.id,
                role=invite.role,
            )
            try:
                await self.permission_repository.add(permission)
            except IntegrityError:
                logfire.warn(
                    "Concurrent redemption detected",
                    chest_id=str(invite.chest_id),
                    caller_id=str(caller.id),
                )
                raise ConflictError("User already has access to this chest")

            await self.invite_repository.delete(invite.id)

            logfire.info(
                "Invite redeemed",
                invite_id=str(invite.id),
                chest_id=str(invite.chest_id),
                user_id=str(caller.id),
                role=invite.role.value,
            )
            return invite.chest_id

    async def list_pending(self, chest_id: ChestId, caller_id: UserId) -> list[Invite]:
        """List outstanding invites of a chest.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller (owner or admin)

        Returns:
            Non-expired invites, newest first
        """
        with logfire.span(
            "invite_service.list_pending",
            chest_id=str(chest_id),
            caller_id=str(caller_id),
        ):
            await self.permission_service.require(
                chest_id, caller_id, Role.ADMIN, "view pending invites"
            )
            now = self.clock()
            invites = [
                invite
                for invite in await self.invite_repository.find_by_chest(chest_id)
                if not invite.is_expired(now)
            ]
            logfire.info(
                "Pending invites listed", chest_id=str(chest_id), count=len(invites)
            )
            return invites

    async def revoke_invite(
        self, chest_id: ChestId, caller_id: UserId, invite_id: InviteId
    ) -> None:
        """Withdraw a pending invite.

        Unknown invites, or invites belonging to another chest, are left alone.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller (owner or admin)
            invite_id: Invite to withdraw
        """
        with logfire.span(
            "invite_service.revoke_invite",
            chest_id=str(chest_id),
            invite_id=str(invite_id),
        ):
            await self.permission_service.require(
                chest_id, caller_id, Role.ADMIN, "revoke invites"
            )
            invites = await self.invite_repository.find_by_chest(chest_id)
            if any(invite.id == invite_id for invite in invites):
                await self.invite_repository.delete(invite_id)
                logfire.info("Invite revoked", invite_id=str(invite_id))
            else:
                logfire.info("Invite to revoke not found", invite_id=str(invite_id))
