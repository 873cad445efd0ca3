"""List pending invites use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hoard.domain.service import InviteService
from hoard.domain.value import ChestId, Role, UserId
from hoard.util.clock import to_epoch_millis


class ListInvitesRequest(BaseModel):
    """List invites request."""

    chest_id: str
    user_id: str


class PendingInviteInfo(BaseModel):
    """Outstanding invite, without its token."""

    invite_id: str
    email: str
    role: Role
    invited_by: str
    expires_at: int  # Epoch milliseconds
    created_at: datetime


class ListInvitesResponse(BaseModel):
    """List invites response."""

    invites: list[PendingInviteInfo]


class ListInvitesUseCase:
    """Use case for the pending-invites section of the collaborator panel."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize list invites use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        """List outstanding invites of a chest.

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is neither owner nor admin
        """
        invites = await self.invite_service.list_pending(
            ChestId(UUID(request.chest_id)), UserId(UUID(request.user_id))
        )
        return ListInvitesResponse(
            invites=[
                PendingInviteInfo(
                    invite_id=str(invite.id),
                    email=invite.email,
                    role=invite.role,
                    invited_by=str(invite.invited_by),
                    expires_at=to_epoch_millis(invite.expires_at),
                    created_at=invite.created_at,
                )
                for invite in invites
            ]
        )
