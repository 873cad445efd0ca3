"""Invite use cases."""

from hoard.application.usecase.invite.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
)
from hoard.application.usecase.invite.invite_user import (
    InviteUserRequest,
    InviteUserResponse,
    InviteUserUseCase,
)
from hoard.application.usecase.invite.list_invites import (
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
    PendingInviteInfo,
)
from hoard.application.usecase.invite.revoke_invite import (
    RevokeInviteRequest,
    RevokeInviteUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteResponse",
    "AcceptInviteUseCase",
    "InviteUserRequest",
    "InviteUserResponse",
    "InviteUserUseCase",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
    "PendingInviteInfo",
    "RevokeInviteRequest",
    "RevokeInviteUseCase",
]
