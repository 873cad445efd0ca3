"""Delete chest use case."""

from uuid import UUID

from pydantic import BaseModel

from hoard.domain.service import ChestService
from hoard.domain.value import ChestId, UserId


class DeleteChestRequest(BaseModel):
    """Delete chest request."""

    chest_id: str
    user_id: str


class DeleteChestUseCase:
    """Use case for deleting a chest with everything in it."""

    def __init__(self, chest_service: ChestService) -> None:
        """Initialize delete chest use case.

        Args:
            chest_service: Chest lifecycle domain service
        """
        self.chest_service = chest_service

    async def execute(self, request: DeleteChestRequest) -> None:
        """Delete the chest, its permissions, invites and items.

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is not the owner
        """
        await self.chest_service.delete_chest(
            ChestId(UUID(request.chest_id)), UserId(UUID(request.user_id))
        )
