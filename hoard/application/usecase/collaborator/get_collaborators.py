"""Get collaborators use case."""

from uuid import UUID

from pydantic import BaseModel

from hoard.domain.service import Collaborator, CollaboratorService
from hoard.domain.value import ChestId, Role, UserId


class GetCollaboratorsRequest(BaseModel):
    """Get collaborators request."""

    chest_id: str
    user_id: str


class CollaboratorInfo(BaseModel):
    """Collaborator information for response."""

    user_id: str
    email: str | None
    name: str | None
    role: Role


class GetCollaboratorsResponse(BaseModel):
    """Owner and collaborators of a chest."""

    owner: CollaboratorInfo
    collaborators: list[CollaboratorInfo]


def _info(collaborator: Collaborator) -> CollaboratorInfo:
    return CollaboratorInfo(
        user_id=str(collaborator.user_id),
        email=collaborator.email,
        name=collaborator.name,
        role=collaborator.role,
    )


class GetCollaboratorsUseCase:
    """Use case for the collaborator panel."""

    def __init__(self, collaborator_service: CollaboratorService) -> None:
        """Initialize get collaborators use case.

        Args:
            collaborator_service: Collaborator directory domain service
        """
        self.collaborator_service = collaborator_service

    async def execute(
        self, request: GetCollaboratorsRequest
    ) -> GetCollaboratorsResponse:
        """List the owner and everyone the chest is shared with.

        Raises:
            NotFoundError: If the chest does not exist
            AccessDeniedError: If the caller has no role on the chest
        """
        result = await self.collaborator_service.list_collaborators(
            ChestId(UUID(request.chest_id)), UserId(UUID(request.user_id))
        )
        return GetCollaboratorsResponse(
            owner=_info(result.owner),
            collaborators=[_info(c) for c in result.collaborators],
        )
