"""Item entity.

Items are the typed content of a chest. Only the fields relevant to the
item's type are populated.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hoard.domain.model.common import DomainModel
from hoard.domain.value import ChestId, ItemId, ItemType, Tag, UserId
from hoard.util.clock import utcnow


class Item(DomainModel):
    """Item entity belonging to exactly one chest."""

    id: ItemId
    chest_id: ChestId
    type: ItemType
    created_by: UserId
    stack_size: int = Field(default=1, ge=1)
    tags: list[Tag] = Field(default_factory=list)
    date_time: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)

    # Link fields
    url: Optional[str] = None
    title: Optional[str] = None

    # Note fields
    content: Optional[str] = None

    # Todo fields
    label: Optional[str] = None
    completed: Optional[bool] = None

    # File/Image fields
    storage_id: Optional[str] = None
    filename: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)
