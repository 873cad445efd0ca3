"""List items use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hoard.domain.model import Item
from hoard.domain.service import ItemService
from hoard.domain.value import ChestId, ItemType, UserId


class ListItemsRequest(BaseModel):
    """List items request."""

    chest_id: str
    user_id: str


class ItemInfo(BaseModel):
    """Item information for response."""

    item_id: str
    chest_id: str
    type: ItemType
    created_by: str
    created_at: datetime
    stack_size: int
    tags: list[str]
    date_time: datetime | None
    url: str | None
    title: str | None
    content: str | None
    label: str | None
    completed: bool | None
    storage_id: str | None
    filename: str | None
    mime_type: str | None
    file_size: int | None


def item_info(item: Item) -> ItemInfo:
    """Build the response representation of an item."""
    return ItemInfo(
        item_id=str(item.id),
        chest_id=str(item.chest_id),
        type=item.type,
        created_by=str(item.created_by),
        created_at=item.created_at,
        stack_size=item.stack_size,
        tags=item.tags,
        date_time=item.date_time,
        url=item.url,
        title=item.title,
        content=item.content,
        label=item.label,
        completed=item.completed,
        storage_id=item.storage_id,
        filename=item.filename,
        mime_type=item.mime_type,
        file_size=item.file_size,
    )


class ListItemsResponse(BaseModel):
    """List items response."""

    items: list[ItemInfo]


class ListItemsUseCase:
    """Use case for listing a chest's items."""

    def __init__(self, item_service: ItemService) -> None:
        """Initialize list items use case.

        Args:
            item_service: Item domain service
        """
        self.item_service = item_service

    async def execute(self, request: ListItemsRequest) -> ListItemsResponse:
        """List items newest first.

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller has no role on the chest
        """
        items = await self.item_service.list_items(
            ChestId(UUID(request.chest_id)), UserId(UUID(request.user_id))
        )
        return ListItemsResponse(items=[item_info(item) for item in items])
