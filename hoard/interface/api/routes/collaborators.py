"""Collaborator routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status

from hoard.application.usecase.auth import GetCurrentUserUseCase
from hoard.application.usecase.collaborator import (
    GetCollaboratorsRequest,
    GetCollaboratorsResponse,
    GetCollaboratorsUseCase,
    RemoveCollaboratorRequest,
    RemoveCollaboratorUseCase,
)
from hoard.interface.api.auth import authenticate

router = APIRouter(
    prefix="/chests/{chest_id}/collaborators",
    tags=["collaborators"],
    route_class=DishkaRoute,
)


@router.get("", response_model=GetCollaboratorsResponse)
async def get_collaborators(
    chest_id: UUID,
    get_collaborators_use_case: FromDishka[GetCollaboratorsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCollaboratorsResponse:
    """List the owner and collaborators of a chest. Any role may read."""
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await get_collaborators_use_case.execute(
        GetCollaboratorsRequest(chest_id=str(chest_id), user_id=user.user_id)
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_collaborator(
    chest_id: UUID,
    user_id: UUID,
    remove_collaborator_use_case: FromDishka[RemoveCollaboratorUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Revoke a collaborator's access. Requires owner or admin.

    Removing someone without access, including the owner, changes nothing.
    """
    caller = await authenticate(get_current_user_use_case, auth_token, authorization)
    await remove_collaborator_use_case.execute(
        RemoveCollaboratorRequest(
            chest_id=str(chest_id),
            user_id=caller.user_id,
            target_user_id=str(user_id),
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
