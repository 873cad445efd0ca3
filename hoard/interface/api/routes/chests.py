"""Chest routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel, Field

from hoard.application.usecase.auth import GetCurrentUserUseCase
from hoard.application.usecase.chest import (
    CreateChestRequest,
    CreateChestResponse,
    CreateChestUseCase,
    DeleteChestRequest,
    DeleteChestUseCase,
    GetChestRequest,
    GetChestResponse,
    GetChestUseCase,
    ListMyChestsRequest,
    ListMyChestsResponse,
    ListMyChestsUseCase,
    UpdateChestRequest,
    UpdateChestUseCase,
)
from hoard.interface.api.auth import authenticate

router = APIRouter(prefix="/chests", tags=["chests"], route_class=DishkaRoute)


class CreateChestAPIRequest(BaseModel):
    """API request for creating a chest."""

    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


class UpdateChestAPIRequest(BaseModel):
    """API request for updating a chest. Omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


@router.post(
    "", response_model=CreateChestResponse, status_code=status.HTTP_201_CREATED
)
async def create_chest(
    request: CreateChestAPIRequest,
    create_chest_use_case: FromDishka[CreateChestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateChestResponse:
    """Create a chest owned by the caller.

    Args:
        request: Chest name and description
        create_chest_use_case: Create chest use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        ID of the new chest
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await create_chest_use_case.execute(
        CreateChestRequest(
            user_id=user.user_id,
            name=request.name,
            description=request.description,
        )
    )


@router.get("", response_model=ListMyChestsResponse)
async def list_my_chests(
    list_my_chests_use_case: FromDishka[ListMyChestsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListMyChestsResponse:
    """List chests the caller owns and chests shared with them."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await list_my_chests_use_case.execute(
        ListMyChestsRequest(user_id=user.user_id)
    )


@router.get("/{chest_id}", response_model=GetChestResponse)
async def get_chest(
    chest_id: UUID,
    get_chest_use_case: FromDishka[GetChestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetChestResponse:
    """Get a chest with the caller's role on it.

    Raises:
        HTTPException: 404 if the chest does not exist, 403 without access
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await get_chest_use_case.execute(
        GetChestRequest(chest_id=str(chest_id), user_id=user.user_id)
    )


@router.patch("/{chest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_chest(
    chest_id: UUID,
    request: UpdateChestAPIRequest,
    update_chest_use_case: FromDishka[UpdateChestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Rename or describe a chest. Requires owner or admin."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    await update_chest_use_case.execute(
        UpdateChestRequest(
            chest_id=str(chest_id),
            user_id=user.user_id,
            name=request.name,
            description=request.description,
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{chest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chest(
    chest_id: UUID,
    delete_chest_use_case: FromDishka[DeleteChestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a chest with its permissions, invites and items.

    Only the owner may delete a chest.
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    await delete_chest_use_case.execute(
        DeleteChestRequest(chest_id=str(chest_id), user_id=user.user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
