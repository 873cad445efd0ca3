"""Add item use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from hoard.domain.service import ItemService
from hoard.domain.value import ChestId, ItemType, Tag, UserId

from .list_items import ItemInfo, item_info


class AddItemRequest(BaseModel):
    """Add item request."""

    chest_id: str
    user_id: str
    type: ItemType
    tags: list[Tag] = Field(default_factory=list)
    date_time: datetime | None = None
    url: str | None = None
    title: str | None = None
    content: str | None = None
    label: str | None = None
    storage_id: str | None = None
    filename: str | None = None
    mime_type: str | None = None
    file_size: int | None = Field(default=None, ge=0)


class AddItemUseCase:
    """Use case for adding an item to a chest."""

    def __init__(self, item_service: ItemService) -> None:
        """Initialize add item use case.

        Args:
            item_service: Item domain service
        """
        self.item_service = item_service

    async def execute(self, request: AddItemRequest) -> ItemInfo:
        """Add the item.

        Args:
            request: Chest, caller and item draft

        Returns:
            Created item

        Raises:
            ValidationError: If required type-specific fields are missing
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is below editor
        """
        item = await self.item_service.add_item(
            chest_id=ChestId(UUID(request.chest_id)),
            caller_id=UserId(UUID(request.user_id)),
            item_type=request.type,
            tags=request.tags,
            date_time=request.date_time,
            url=request.url,
            title=request.title,
            content=request.content,
            label=request.label,
            storage_id=request.storage_id,
            filename=request.filename,
            mime_type=request.mime_type,
            file_size=request.file_size,
        )
        return item_info(item)
