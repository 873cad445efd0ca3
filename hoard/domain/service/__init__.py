"""Domain services."""

from .base import Service
from .chest_service import ChestService
from .collaborator_service import Collaborator, Collaborators, CollaboratorService
from .invite_service import InviteService
from .item_service import ItemService
from .jwt_service import JWTService
from .permission_service import PermissionService
from .user_service import UserService

__all__ = [
    "ChestService",
    "Collaborator",
    "CollaboratorService",
    "Collaborators",
    "InviteService",
    "ItemService",
    "JWTService",
    "PermissionService",
    "Service",
    "UserService",
]
