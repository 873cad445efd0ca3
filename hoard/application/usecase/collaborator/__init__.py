"""Collaborator use cases."""

from hoard.application.usecase.collaborator.get_collaborators import (
    CollaboratorInfo,
    GetCollaboratorsRequest,
    GetCollaboratorsResponse,
    GetCollaboratorsUseCase,
)
from hoard.application.usecase.collaborator.remove_collaborator import (
    RemoveCollaboratorRequest,
    RemoveCollaboratorResponse,
    RemoveCollaboratorUseCase,
)

__all__ = [
    "CollaboratorInfo",
    "GetCollaboratorsRequest",
    "GetCollaboratorsResponse",
    "GetCollaboratorsUseCase",
    "RemoveCollaboratorRequest",
    "RemoveCollaboratorResponse",
    "RemoveCollaboratorUseCase",
]
