"""Invite entity.

Invites let an owner or admin offer a role on a chest to an email address.
The invitee redeems the token after signing in, which turns the invite into
a permission.
"""

from datetime import datetime

from pydantic import Field, field_validator

from hoard.domain.model.common import DomainModel
from hoard.domain.value import ChestId, InviteId, InviteToken, Role, UserId
from hoard.util.clock import utcnow


class Invite(DomainModel):
    """Invite entity - single-use, time-limited.

    Business rules:
    - One outstanding (non-expired) invite per chest/email combination
    - `expires_at` is fixed at creation and never extended
    - Redeeming deletes the invite; only the invited email can redeem it
    - An invite can never grant ownership
    """

    id: InviteId
    chest_id: ChestId
    email: str = Field(min_length=3, max_length=255)
    role: Role
    invited_by: UserId
    token: InviteToken
    expires_at: datetime
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("role")
    @classmethod
    def validate_role_grantable(cls, v: Role) -> Role:
        """An invite can only grant admin, editor or viewer."""
        if not v.is_grantable:
            raise ValueError("Owner role cannot be granted by invite")
        return v

    def is_expired(self, now: datetime) -> bool:
        """Check whether the invite has passed its expiry."""
        return now > self.expires_at
