"""Invite user use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from hoard.application.usecase.base import BaseUseCase
from hoard.config import Settings
from hoard.domain.service import InviteService
from hoard.domain.value import ChestId, Role, UserId
from hoard.util.clock import to_epoch_millis


class InviteUserRequest(BaseModel):
    """Invite user request."""

    chest_id: str
    user_id: str  # Caller, owner or admin of the chest
    email: str = Field(min_length=3, max_length=255)
    role: Role


class InviteUserResponse(BaseModel):
    """Invite user response.

    `expires_at` is in epoch milliseconds.
    """

    invite_id: str
    token: str
    invite_url: str
    expires_at: int


class InviteUserUseCase(BaseUseCase):
    """Use case for inviting someone to a chest by email."""

    def __init__(self, invite_service: InviteService, settings: Settings) -> None:
        """Initialize invite user use case.

        Args:
            invite_service: Invite domain service
            settings: Application settings, for building invite links
        """
        self.invite_service = invite_service
        self.settings = settings

    async def execute(self, request: InviteUserRequest) -> InviteUserResponse:
        """Issue an invite and build the link to share with the invitee.

        Args:
            request: Chest, caller, invitee email and role

        Returns:
            Token, shareable link and expiry

        Raises:
            ValidationError: If the role is owner
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is neither owner nor admin
            ConflictError: If the email already has an outstanding invite
        """
        invite = await self.invite_service.create_invite(
            chest_id=ChestId(UUID(request.chest_id)),
            caller_id=UserId(UUID(request.user_id)),
            email=request.email,
            role=request.role,
        )
        token = invite.token.root
        return InviteUserResponse(
            invite_id=str(invite.id),
            token=token,
            invite_url=self.settings.invite_url(token),
            expires_at=to_epoch_millis(invite.expires_at),
        )
