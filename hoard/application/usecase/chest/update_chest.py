"""Update chest use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from hoard.domain.service import ChestService
from hoard.domain.value import ChestId, UserId


class UpdateChestRequest(BaseModel):
    """Update chest request.

    Fields left as None are not changed.
    """

    chest_id: str
    user_id: str
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


class UpdateChestUseCase:
    """Use case for renaming or describing a chest."""

    def __init__(self, chest_service: ChestService) -> None:
        """Initialize update chest use case.

        Args:
            chest_service: Chest lifecycle domain service
        """
        self.chest_service = chest_service

    async def execute(self, request: UpdateChestRequest) -> None:
        """Apply the supplied changes.

        Args:
            request: Chest, caller and new values

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is neither owner nor admin
        """
        await self.chest_service.update_chest(
            chest_id=ChestId(UUID(request.chest_id)),
            caller_id=UserId(UUID(request.user_id)),
            name=request.name,
            description=request.description,
        )
