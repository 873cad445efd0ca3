"""Create chest use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from hoard.domain.service import ChestService
from hoard.domain.value import UserId


class CreateChestRequest(BaseModel):
    """Create chest request."""

    user_id: str  # Caller, becomes the owner
    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


class CreateChestResponse(BaseModel):
    """Create chest response."""

    chest_id: str


class CreateChestUseCase:
    """Use case for creating a chest."""

    def __init__(self, chest_service: ChestService) -> None:
        """Initialize create chest use case.

        Args:
            chest_service: Chest lifecycle domain service
        """
        self.chest_service = chest_service

    async def execute(self, request: CreateChestRequest) -> CreateChestResponse:
        """Create a chest owned by the caller.

        Args:
            request: Chest name, description and caller

        Returns:
            ID of the new chest
        """
        chest = await self.chest_service.create_chest(
            owner_id=UserId(UUID(request.user_id)),
            name=request.name,
            description=request.description,
        )
        return CreateChestResponse(chest_id=str(chest.id))
