"""Update item use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from hoard.domain.service import ItemService
from hoard.domain.value import ItemId, UserId

from .list_items import ItemInfo, item_info


class UpdateItemRequest(BaseModel):
    """Update item request.

    `changes` holds only the fields the caller wants to change.
    """

    item_id: str
    user_id: str
    changes: dict[str, Any]


class UpdateItemUseCase:
    """Use case for editing an item."""

    def __init__(self, item_service: ItemService) -> None:
        """Initialize update item use case.

        Args:
            item_service: Item domain service
        """
        self.item_service = item_service

    async def execute(self, request: UpdateItemRequest) -> ItemInfo:
        """Apply the changes.

        Raises:
            NotFoundError: If the item does not exist
            AccessDeniedError: If the caller is below editor
            ValidationError: If a change targets a field that cannot be edited
        """
        item = await self.item_service.update_item(
            ItemId(UUID(request.item_id)),
            UserId(UUID(request.user_id)),
            request.changes,
        )
        return item_info(item)
