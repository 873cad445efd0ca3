"""Chest aggregate root.

A chest is a named collection of items owned by exactly one user and
optionally shared with collaborators.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hoard.domain.model.common import DomainModel
from hoard.domain.value import ChestId, UserId
from hoard.util.clock import utcnow


class Chest(DomainModel):
    """Chest aggregate root.

    Business rules:
    - `owner_id` is fixed at creation and never changes
    - Ownership is implicit; the owner never has a permission row
    - Deleting a chest deletes its permissions, invites and items
    """

    id: ChestId
    name: str = Field(min_length=1, max_length=200)
    owner_id: UserId
    description: Optional[str] = Field(default=None, max_length=2000)
    created_at: datetime = Field(default_factory=utcnow)

    def is_owned_by(self, user_id: UserId) -> bool:
        """Check whether the given user owns this chest."""
        return self.owner_id == user_id
