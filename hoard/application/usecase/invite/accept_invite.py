"""Accept invite use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from hoard.application.usecase.base import BaseUseCase
from hoard.domain.service import InviteService, UserService
from hoard.domain.value import InviteToken, UserId


class AcceptInviteRequest(BaseModel):
    """Accept invite request."""

    token: str = Field(min_length=1, max_length=255)
    user_id: str  # Caller redeeming the token


class AcceptInviteResponse(BaseModel):
    """Accept invite response."""

    chest_id: str


class AcceptInviteUseCase(BaseUseCase):
    """Use case for redeeming an invite token."""

    def __init__(
        self, invite_service: InviteService, user_service: UserService
    ) -> None:
        """Initialize accept invite use case.

        Args:
            invite_service: Invite domain service
            user_service: User directory domain service
        """
        self.invite_service = invite_service
        self.user_service = user_service

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        """Redeem the token as the caller.

        The caller is loaded from the directory so the invite is matched
        against their verified email.

        Args:
            request: Token and caller

        Returns:
            Chest the caller now has access to

        Raises:
            NotFoundError: If the token is unknown
            ExpiredError: If the invite has expired
            ForbiddenError: If the invite was sent to another email
            ConflictError: If the caller already has access
        """
        caller = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        chest_id = await self.invite_service.redeem_invite(
            InviteToken(root=request.token), caller
        )
        return AcceptInviteResponse(chest_id=str(chest_id))
