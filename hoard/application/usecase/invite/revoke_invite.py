"""Revoke invite use case."""

from uuid import UUID

from pydantic import BaseModel

from hoard.domain.service import InviteService
from hoard.domain.value import ChestId, InviteId, UserId


class RevokeInviteRequest(BaseModel):
    """Revoke invite request."""

    chest_id: str
    user_id: str
    invite_id: str


class RevokeInviteUseCase:
    """Use case for withdrawing a pending invite."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize revoke invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: RevokeInviteRequest) -> None:
        """Delete the invite if it is still pending.

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is neither owner nor admin
        """
        await self.invite_service.revoke_invite(
            chest_id=ChestId(UUID(request.chest_id)),
            caller_id=UserId(UUID(request.user_id)),
            invite_id=InviteId(UUID(request.invite_id)),
        )
