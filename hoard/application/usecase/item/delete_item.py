"""Delete item use case."""

from uuid import UUID

from pydantic import BaseModel

from hoard.domain.service import ItemService
from hoard.domain.value import ItemId, UserId


class DeleteItemRequest(BaseModel):
    """Delete item request."""

    item_id: str
    user_id: str


class DeleteItemUseCase:
    """Use case for deleting an item."""

    def __init__(self, item_service: ItemService) -> None:
        self.item_service = item_service

    async def execute(self, request: DeleteItemRequest) -> None:
        """Delete the item.

        Raises:
            NotFoundError: If the item does not exist
            AccessDeniedError: If the caller is below editor
        """
        await self.item_service.delete_item(
            ItemId(UUID(request.item_id)), UserId(UUID(request.user_id))
        )
