"""Item domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from hoard.domain.error import NotFoundError, ValidationError
from hoard.domain.model import Item
from hoard.domain.repository import ItemRepository
from hoard.domain.value import ChestId, ItemId, ItemType, Role, UserId

from .base import Service
from .permission_service import PermissionService

# Fields an editor may change after creation
UPDATABLE_FIELDS = frozenset(
    {"date_time", "tags", "url", "title", "content", "label", "completed"}
)


class ItemService(Service):
    """Domain service for item operations.

    Viewers can read a chest's items; editors, admins and the owner can
    add, change and delete them.
    """

    def __init__(
        self, item_repository: ItemRepository, permission_service: PermissionService
    ) -> None:
        """Initialize item service.

        Args:
            item_repository: Item repository
            permission_service: Permission resolver
        """
        self.item_repository = item_repository
        self.permission_service = permission_service

    async def list_items(self, chest_id: ChestId, caller_id: UserId) -> list[Item]:
        """List a chest's items, newest first.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller (any role)

        Returns:
            List of items
        """
        with logfire.span(
            "item_service.list_items", chest_id=str(chest_id), caller_id=str(caller_id)
        ):
            await self.permission_service.require(
                chest_id, caller_id, Role.VIEWER, "view items"
            )
            items = await self.item_repository.find_by_chest(chest_id)
            logfire.info("Items listed", chest_id=str(chest_id), count=len(items))
            return items

    async def add_item(
        self,
        chest_id: ChestId,
        caller_id: UserId,
        item_type: ItemType,
        tags: list[str] | None = None,
        date_time: datetime | None = None,
        url: str | None = None,
        title: str | None = None,
        content: str | None = None,
        label: str | None = None,
        storage_id: str | None = None,
        filename: str | None = None,
        mime_type: str | None = None,
        file_size: int | None = None,
    ) -> Item:
        """Add an item to a chest.

        Only the fields belonging to `item_type` are kept. Links default their
        title to the URL, notes start empty and todos start open.

        Args:
            chest_id: Chest ID
            caller_id: Authenticated caller (editor or above)
            item_type: Kind of item
            tags: Optional tags
            date_time: Optional date the item refers to
            url: Link URL
            title: Link title
            content: Note body
            label: Todo label
            storage_id: Blob storage reference for images and files
            filename: Uploaded file name
            mime_type: Uploaded file MIME type
            file_size: Uploaded file size in bytes

        Returns:
            Created item

        Raises:
            NotFoundError: If the chest is deleted before the item is stored
            ValidationError: If a link has no URL or an upload has no storage ID
        """
        with logfire.span(
            "item_service.add_item",
            chest_id=str(chest_id),
            caller_id=str(caller_id),
            item_type=item_type.value,
        ):
            await self.permission_service.require(
                chest_id, caller_id, Role.EDITOR, "add items"
            )

            fields: dict[str, Any] = {}
            if item_type == ItemType.LINK:
                if not url:
                    raise ValidationError("URL is required for link items")
                fields = {"url": url, "title": title or url}
            elif item_type == ItemType.NOTE:
                fields = {"content": content or ""}
            elif item_type == ItemType.TODO:
                fields = {"label": label or "", "completed": False}
            elif item_type.is_upload:
                if not storage_id:
                    raise ValidationError(
                        f"Storage ID is required for {item_type.value} items"
                    )
                fields = {
                    "storage_id": storage_id,
                    "filename": filename,
                    "mime_type": mime_type,
                    "file_size": file_size,
                }

            item = Item(
                id=ItemId(uuid4()),
                chest_id=chest_id,
                type=item_type,
                created_by=caller_id,
                tags=tags or [],
                date_time=date_time,
                **fields,
            )

            try:
                saved = await self.item_repository.save(item)
            except IntegrityError:
                logfire.warn("Chest deleted before item insert", chest_id=str(chest_id))
                raise NotFoundError("Chest", str(chest_id))

            logfire.info("Item added", item_id=str(saved.id), chest_id=str(chest_id))
            return saved

    async def update_item(
        self, item_id: ItemId, caller_id: UserId, changes: dict[str, Any]
    ) -> Item:
        """Apply a partial update to an item.

        Args:
            item_id: Item ID
            caller_id: Authenticated caller (editor or above on the item's chest)
            changes: Field values to change

        Returns:
            Updated item

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If a change targets a field that cannot be edited
        """
        with logfire.span(
            "item_service.update_item",
            item_id=str(item_id),
            caller_id=str(caller_id),
            fields=sorted(changes),
        ):
            item = await self._get_item(item_id)
            await self.permission_service.require(
                item.chest_id, caller_id, Role.EDITOR, "edit items"
            )

            unknown = set(changes) - UPDATABLE_FIELDS
            if unknown:
                raise ValidationError(
                    f"Cannot update item fields: {', '.join(sorted(unknown))}"
                )

            updated = Item.model_validate({**item.model_dump(), **changes})
            saved = await self.item_repository.save(updated)
            logfire.info("Item updated", item_id=str(item_id))
            return saved

    async def delete_item(self, item_id: ItemId, caller_id: UserId) -> None:
        """Delete an item.

        Args:
            item_id: Item ID
            caller_id: Authenticated caller (editor or above on the item's chest)

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "item_service.delete_item", item_id=str(item_id), caller_id=str(caller_id)
        ):
            item = await self._get_item(item_id)
            await self.permission_service.require(
                item.chest_id, caller_id, Role.EDITOR, "delete items"
            )
            await self.item_repository.delete(item_id)
            logfire.info("Item deleted", item_id=str(item_id))

    async def _get_item(self, item_id: ItemId) -> Item:
        item = await self.item_repository.find_by_id(item_id)
        if item is None:
            logfire.warn("Item not found", item_id=str(item_id))
            raise NotFoundError("Item", str(item_id))
        return item
