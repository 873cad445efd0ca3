"""Item routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel, Field

from hoard.application.usecase.auth import GetCurrentUserUseCase
from hoard.application.usecase.item import (
    AddItemRequest,
    AddItemUseCase,
    DeleteItemRequest,
    DeleteItemUseCase,
    ItemInfo,
    ListItemsRequest,
    ListItemsResponse,
    ListItemsUseCase,
    UpdateItemRequest,
    UpdateItemUseCase,
)
from hoard.domain.value import ItemType, Tag
from hoard.interface.api.auth import authenticate

router = APIRouter(tags=["items"], route_class=DishkaRoute)


class AddItemAPIRequest(BaseModel):
    """API request for adding an item."""

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


class UpdateItemAPIRequest(BaseModel):
    """API request for editing an item. Only sent fields change."""

    tags: list[Tag] | None = None
    date_time: datetime | None = None
    url: str | None = None
    title: str | None = None
    content: str | None = None
    label: str | None = None
    completed: bool | None = None


@router.get("/chests/{chest_id}/items", response_model=ListItemsResponse)
async def list_items(
    chest_id: UUID,
    list_items_use_case: FromDishka[ListItemsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListItemsResponse:
    """List a chest's items, newest first. Any role may read."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await list_items_use_case.execute(
        ListItemsRequest(chest_id=str(chest_id), user_id=user.user_id)
    )


@router.post(
    "/chests/{chest_id}/items",
    response_model=ItemInfo,
    status_code=status.HTTP_201_CREATED,
)
async def add_item(
    chest_id: UUID,
    request: AddItemAPIRequest,
    add_item_use_case: FromDishka[AddItemUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ItemInfo:
    """Add an item to a chest. Requires editor or above."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await add_item_use_case.execute(
        AddItemRequest(
            chest_id=str(chest_id),
            user_id=user.user_id,
            **request.model_dump(),
        )
    )


@router.patch("/items/{item_id}", response_model=ItemInfo)
async def update_item(
    item_id: UUID,
    request: UpdateItemAPIRequest,
    update_item_use_case: FromDishka[UpdateItemUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ItemInfo:
    """Edit an item. Requires editor or above on the item's chest."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await update_item_use_case.execute(
        UpdateItemRequest(
            item_id=str(item_id),
            user_id=user.user_id,
            changes=request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: UUID,
    delete_item_use_case: FromDishka[DeleteItemUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete an item. Requires editor or above on the item's chest."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    await delete_item_use_case.execute(
        DeleteItemRequest(item_id=str(item_id), user_id=user.user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
