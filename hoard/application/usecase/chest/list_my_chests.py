"""List my chests use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hoard.domain.model import Chest
from hoard.domain.service import ChestService
from hoard.domain.value import Role, UserId


class ListMyChestsRequest(BaseModel):
    """List my chests request."""

    user_id: str


class ChestSummary(BaseModel):
    """Chest entry of a listing."""

    chest_id: str
    name: str
    description: str | None
    owner_id: str
    created_at: datetime
    user_role: Role


class ListMyChestsResponse(BaseModel):
    """Chests the caller owns and chests shared with them."""

    owned: list[ChestSummary]
    shared: list[ChestSummary]


def _summary(chest: Chest, role: Role) -> ChestSummary:
    return ChestSummary(
        chest_id=str(chest.id),
        name=chest.name,
        description=chest.description,
        owner_id=str(chest.owner_id),
        created_at=chest.created_at,
        user_role=role,
    )


class ListMyChestsUseCase:
    """Use case for the caller's chest list."""

    def __init__(self, chest_service: ChestService) -> None:
        """Initialize list my chests use case.

        Args:
            chest_service: Chest lifecycle domain service
        """
        self.chest_service = chest_service

    async def execute(self, request: ListMyChestsRequest) -> ListMyChestsResponse:
        """List owned and shared chests, newest first.

        Args:
            request: Caller

        Returns:
            Owned chests tagged owner, shared chests tagged with the stored role
        """
        owned, shared = await self.chest_service.list_chests(
            UserId(UUID(request.user_id))
        )
        return ListMyChestsResponse(
            owned=[_summary(chest, Role.OWNER) for chest in owned],
            shared=[_summary(chest, role) for chest, role in shared],
        )
