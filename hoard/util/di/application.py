"""Application layer DI providers."""

from dishka import Scope, provide

from hoard.application.usecase.auth import GetCurrentUserUseCase
from hoard.application.usecase.chest import (
    CreateChestUseCase,
    DeleteChestUseCase,
    GetChestUseCase,
    ListMyChestsUseCase,
    UpdateChestUseCase,
)
from hoard.application.usecase.collaborator import (
    GetCollaboratorsUseCase,
    RemoveCollaboratorUseCase,
)
from hoard.application.usecase.invite import (
    AcceptInviteUseCase,
    InviteUserUseCase,
    ListInvitesUseCase,
    RevokeInviteUseCase,
)
from hoard.application.usecase.item import (
    AddItemUseCase,
    DeleteItemUseCase,
    ListItemsUseCase,
    UpdateItemUseCase,
)
from hoard.config import Settings
from hoard.domain.service import (
    ChestService,
    CollaboratorService,
    InviteService,
    ItemService,
    JWTService,
    UserService,
)
from hoard.util.di.base import ProviderBase


class ApplicationProvider(ProviderBase):
    """Use cases, one set per request."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Chest use cases
    @provide
    def get_create_chest_use_case(
        self, chest_service: ChestService
    ) -> CreateChestUseCase:
        """Provide create chest use case."""
        return CreateChestUseCase(chest_service=chest_service)

    @provide
    def get_list_my_chests_use_case(
        self, chest_service: ChestService
    ) -> ListMyChestsUseCase:
        """Provide list my chests use case."""
        return ListMyChestsUseCase(chest_service=chest_service)

    @provide
    def get_get_chest_use_case(self, chest_service: ChestService) -> GetChestUseCase:
        """Provide get chest use case."""
        return GetChestUseCase(chest_service=chest_service)

    @provide
    def get_update_chest_use_case(
        self, chest_service: ChestService
    ) -> UpdateChestUseCase:
        """Provide update chest use case."""
        return UpdateChestUseCase(chest_service=chest_service)

    @provide
    def get_delete_chest_use_case(
        self, chest_service: ChestService
    ) -> DeleteChestUseCase:
        """Provide delete chest use case."""
        return DeleteChestUseCase(chest_service=chest_service)

    # Invite use cases
    @provide
    def get_invite_user_use_case(
        self, invite_service: InviteService, settings: Settings
    ) -> InviteUserUseCase:
        """Provide invite user use case."""
        return InviteUserUseCase(invite_service=invite_service, settings=settings)

    @provide
    def get_accept_invite_use_case(
        self, invite_service: InviteService, user_service: UserService
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(
            invite_service=invite_service, user_service=user_service
        )

    @provide
    def get_list_invites_use_case(
        self, invite_service: InviteService
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(invite_service=invite_service)

    @provide
    def get_revoke_invite_use_case(
        self, invite_service: InviteService
    ) -> RevokeInviteUseCase:
        """Provide revoke invite use case."""
        return RevokeInviteUseCase(invite_service=invite_service)

    # Collaborator use cases
    @provide
    def get_get_collaborators_use_case(
        self, collaborator_service: CollaboratorService
    ) -> GetCollaboratorsUseCase:
        """Provide get collaborators use case."""
        return GetCollaboratorsUseCase(collaborator_service=collaborator_service)

    @provide
    def get_remove_collaborator_use_case(
        self, collaborator_service: CollaboratorService
    ) -> RemoveCollaboratorUseCase:
        """Provide remove collaborator use case."""
        return RemoveCollaboratorUseCase(collaborator_service=collaborator_service)

    # Item use cases
    @provide
    def get_list_items_use_case(self, item_service: ItemService) -> ListItemsUseCase:
        """Provide list items use case."""
        return ListItemsUseCase(item_service=item_service)

    @provide
    def get_add_item_use_case(self, item_service: ItemService) -> AddItemUseCase:
        """Provide add item use case."""
        return AddItemUseCase(item_service=item_service)

    @provide
    def get_update_item_use_case(self, item_service: ItemService) -> UpdateItemUseCase:
        """Provide update item use case."""
        return UpdateItemUseCase(item_service=item_service)

    @provide
    def get_delete_item_use_case(self, item_service: ItemService) -> DeleteItemUseCase:
        """Provide delete item use case."""
        return DeleteItemUseCase(item_service=item_service)
