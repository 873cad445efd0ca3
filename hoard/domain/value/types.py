"""Domain value objects for Hoard.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Annotated

from pydantic import StringConstraints, field_validator

from hoard.domain.value.common import RootValueObject


class Role(str, Enum):
    """Role a user holds on a chest.

    Roles are totally ordered: owner > admin > editor > viewer.
    Only the last three can be stored in a permission row; ownership is
    derived from the chest itself.
    """

    OWNER = "owner"
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

    @property
    def rank(self) -> int:
        """Authority rank, higher means more authority."""
        return _ROLE_RANK[self]

    @property
    def is_grantable(self) -> bool:
        """Whether the role can be granted through an invite."""
        return self is not Role.OWNER

    def at_least(self, minimum: "Role") -> bool:
        """Check whether this role carries at least the authority of `minimum`."""
        return self.rank >= minimum.rank


_ROLE_RANK = {
    Role.VIEWER: 1,
    Role.EDITOR: 2,
    Role.ADMIN: 3,
    Role.OWNER: 4,
}


# Bounded by the items.tags column type
Tag = Annotated[str, StringConstraints(max_length=64)]


class ItemType(str, Enum):
    """Kind of content stored in a chest."""

    LINK = "link"
    NOTE = "note"
    TODO = "todo"
    IMAGE = "image"
    FILE = "file"

    @property
    def is_upload(self) -> bool:
        """Whether the item content lives in blob storage."""
        return self in (ItemType.IMAGE, ItemType.FILE)


class InviteToken(RootValueObject[str]):
    """URL-safe invite token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    @property
    def redacted(self) -> str:
        """Token prefix safe for logs."""
        return self.root[:8] + "..."
