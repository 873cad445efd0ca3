"""Invite routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel, Field

from hoard.application.usecase.auth import GetCurrentUserUseCase
from hoard.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    InviteUserRequest,
    InviteUserResponse,
    InviteUserUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
    RevokeInviteRequest,
    RevokeInviteUseCase,
)
from hoard.domain.value import Role
from hoard.interface.api.auth import authenticate

router = APIRouter(tags=["invites"], route_class=DishkaRoute)


class InviteUserAPIRequest(BaseModel):
    """API request for inviting someone to a chest."""

    email: str = Field(min_length=3, max_length=255)
    role: Role


class AcceptInviteAPIRequest(BaseModel):
    """API request for accepting an invite."""

    token: str = Field(min_length=1, max_length=255)


@router.post(
    "/chests/{chest_id}/invites",
    response_model=InviteUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def invite_user(
    chest_id: UUID,
    request: InviteUserAPIRequest,
    invite_user_use_case: FromDishka[InviteUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InviteUserResponse:
    """Invite an email address to a chest.

    Requires owner or admin. The owner role cannot be granted.

    Args:
        chest_id: Chest to share
        request: Invitee email and role
        invite_user_use_case: Invite user use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Token, shareable link and expiry in epoch milliseconds

    Raises:
        HTTPException: 400 for the owner role, 409 if already invited
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await invite_user_use_case.execute(
        InviteUserRequest(
            chest_id=str(chest_id),
            user_id=user.user_id,
            email=request.email,
            role=request.role,
        )
    )


@router.get("/chests/{chest_id}/invites", response_model=ListInvitesResponse)
async def list_invites(
    chest_id: UUID,
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListInvitesResponse:
    """List outstanding invites of a chest. Requires owner or admin."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await list_invites_use_case.execute(
        ListInvitesRequest(chest_id=str(chest_id), user_id=user.user_id)
    )


@router.delete(
    "/chests/{chest_id}/invites/{invite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def revoke_invite(
    chest_id: UUID,
    invite_id: UUID,
    revoke_invite_use_case: FromDishka[RevokeInviteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Withdraw a pending invite. Requires owner or admin."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    await revoke_invite_use_case.execute(
        RevokeInviteRequest(
            chest_id=str(chest_id), user_id=user.user_id, invite_id=str(invite_id)
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/invites/accept", response_model=AcceptInviteResponse)
async def accept_invite(
    request: AcceptInviteAPIRequest,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AcceptInviteResponse:
    """Redeem an invite token as the caller.

    Raises:
        HTTPException: 404 unknown token, 410 expired, 403 addressed to
            another email, 409 caller already has access
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await accept_invite_use_case.execute(
        AcceptInviteRequest(token=request.token, user_id=user.user_id)
    )
