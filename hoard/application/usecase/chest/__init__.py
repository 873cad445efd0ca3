"""Chest use cases."""

from hoard.application.usecase.chest.create_chest import (
    CreateChestRequest,
    CreateChestResponse,
    CreateChestUseCase,
)
from hoard.application.usecase.chest.delete_chest import (
    DeleteChestRequest,
    DeleteChestUseCase,
)
from hoard.application.usecase.chest.get_chest import (
    GetChestRequest,
    GetChestResponse,
    GetChestUseCase,
)
from hoard.application.usecase.chest.list_my_chests import (
    ChestSummary,
    ListMyChestsRequest,
    ListMyChestsResponse,
    ListMyChestsUseCase,
)
from hoard.application.usecase.chest.update_chest import (
    UpdateChestRequest,
    UpdateChestUseCase,
)

__all__ = [
    "ChestSummary",
    "CreateChestRequest",
    "CreateChestResponse",
    "CreateChestUseCase",
    "DeleteChestRequest",
    "DeleteChestUseCase",
    "GetChestRequest",
    "GetChestResponse",
    "GetChestUseCase",
    "ListMyChestsRequest",
    "ListMyChestsResponse",
    "ListMyChestsUseCase",
    "UpdateChestRequest",
    "UpdateChestUseCase",
]
