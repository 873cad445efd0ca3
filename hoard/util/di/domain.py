"""Domain layer DI providers."""

from dishka import Scope, provide

from hoard.config import AuthSettings, InvitationSettings
from hoard.domain.repository import (
    ChestRepository,
    InviteRepository,
    ItemRepository,
    PermissionRepository,
    UserRepository,
)
from hoard.domain.service import (
    ChestService,
    CollaboratorService,
    InviteService,
    ItemService,
    JWTService,
    PermissionService,
    UserService,
)
from hoard.util.di.base import ProviderBase


class DomainProvider(ProviderBase):
    """Domain services.

    REQUEST-scoped like the repositories they wrap, so every service of a
    request works inside the same transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user directory domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_permission_service(
        self,
        chest_repository: ChestRepository,
        permission_repository: PermissionRepository,
    ) -> PermissionService:
        """Provide permission resolver."""
        return PermissionService(
            chest_repository=chest_repository,
            permission_repository=permission_repository,
        )

    @provide
    def get_chest_service(
        self,
        chest_repository: ChestRepository,
        permission_repository: PermissionRepository,
        invite_repository: InviteRepository,
        item_repository: ItemRepository,
        permission_service: PermissionService,
    ) -> ChestService:
        """Provide chest lifecycle domain service."""
        return ChestService(
            chest_repository=chest_repository,
            permission_repository=permission_repository,
            invite_repository=invite_repository,
            item_repository=item_repository,
            permission_service=permission_service,
        )

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        permission_repository: PermissionRepository,
        permission_service: PermissionService,
        invitation_settings: InvitationSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            permission_repository=permission_repository,
            permission_service=permission_service,
            expiry_days=invitation_settings.expiry_days,
            token_bytes=invitation_settings.token_bytes,
        )

    @provide
    def get_collaborator_service(
        self,
        permission_repository: PermissionRepository,
        user_repository: UserRepository,
        permission_service: PermissionService,
    ) -> CollaboratorService:
        """Provide collaborator directory domain service."""
        return CollaboratorService(
            permission_repository=permission_repository,
            user_repository=user_repository,
            permission_service=permission_service,
        )

    @provide
    def get_item_service(
        self,
        item_repository: ItemRepository,
        permission_service: PermissionService,
    ) -> ItemService:
        """Provide item catalog domain service."""
        return ItemService(
            item_repository=item_repository,
            permission_service=permission_service,
        )
