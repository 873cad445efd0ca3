"""Get chest use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hoard.domain.service import ChestService
from hoard.domain.value import ChestId, Role, UserId


class GetChestRequest(BaseModel):
    """Get chest request."""

    chest_id: str
    user_id: str


class GetChestResponse(BaseModel):
    """Chest details with the caller's role."""

    chest_id: str
    name: str
    description: str | None
    owner_id: str
    created_at: datetime
    user_role: Role


class GetChestUseCase:
    """Use case for opening a chest."""

    def __init__(self, chest_service: ChestService) -> None:
        """Initialize get chest use case.

        Args:
            chest_service: Chest lifecycle domain service
        """
        self.chest_service = chest_service

    async def execute(self, request: GetChestRequest) -> GetChestResponse:
        """Load a chest the caller has any role on.

        Args:
            request: Chest and caller

        Returns:
            Chest details

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller has no role on the chest
        """
        chest, role = await self.chest_service.get_chest(
            ChestId(UUID(request.chest_id)), UserId(UUID(request.user_id))
        )
        return GetChestResponse(
            chest_id=str(chest.id),
            name=chest.name,
            description=chest.description,
            owner_id=str(chest.owner_id),
            created_at=chest.created_at,
            user_role=role,
        )
