"""Remove collaborator use case."""

from uuid import UUID

from pydantic import BaseModel

from hoard.domain.service import CollaboratorService
from hoard.domain.value import ChestId, UserId


class RemoveCollaboratorRequest(BaseModel):
    """Remove collaborator request."""

    chest_id: str
    user_id: str  # Caller, owner or admin of the chest
    target_user_id: str


class RemoveCollaboratorResponse(BaseModel):
    """Remove collaborator response."""

    removed: bool


class RemoveCollaboratorUseCase:
    """Use case for revoking a collaborator's access."""

    def __init__(self, collaborator_service: CollaboratorService) -> None:
        """Initialize remove collaborator use case.

        Args:
            collaborator_service: Collaborator directory domain service
        """
        self.collaborator_service = collaborator_service

    async def execute(
        self, request: RemoveCollaboratorRequest
    ) -> RemoveCollaboratorResponse:
        """Delete the target's permission on the chest, if any.

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller is neither owner nor admin
        """
        removed = await self.collaborator_service.remove_collaborator(
            chest_id=ChestId(UUID(request.chest_id)),
            caller_id=UserId(UUID(request.user_id)),
            target_user_id=UserId(UUID(request.target_user_id)),
        )
        return RemoveCollaboratorResponse(removed=removed)
