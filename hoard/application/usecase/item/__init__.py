"""Item use cases."""

from hoard.application.usecase.item.add_item import AddItemRequest, AddItemUseCase
from hoard.application.usecase.item.delete_item import (
    DeleteItemRequest,
    DeleteItemUseCase,
)
from hoard.application.usecase.item.list_items import (
    ItemInfo,
    ListItemsRequest,
    ListItemsResponse,
    ListItemsUseCase,
)
from hoard.application.usecase.item.update_item import (
    UpdateItemRequest,
    UpdateItemUseCase,
)

__all__ = [
    "AddItemRequest",
    "AddItemUseCase",
    "DeleteItemRequest",
    "DeleteItemUseCase",
    "ItemInfo",
    "ListItemsRequest",
    "ListItemsResponse",
    "ListItemsUseCase",
    "UpdateItemRequest",
    "UpdateItemUseCase",
]
