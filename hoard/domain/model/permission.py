"""Permission entity."""

from datetime import datetime

from pydantic import Field, field_validator

from hoard.domain.model.common import DomainModel
from hoard.domain.value import ChestId, PermissionId, Role, UserId
from hoard.util.clock import utcnow


class Permission(DomainModel):
    """Grant of a role on a chest to a non-owner user.

    At most one permission exists per (chest, user) pair, enforced by a
    unique constraint in the store.
    """

    id: PermissionId
    chest_id: ChestId
    user_id: UserId
    role: Role
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("role")
    @classmethod
    def validate_role_grantable(cls, v: Role) -> Role:
        """Ownership is never stored as a permission row."""
        if not v.is_grantable:
            raise ValueError("Owner role cannot be stored in a permission")
        return v
