"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    A use case takes a pydantic request, calls one or more domain services
    and returns a pydantic response. Domain errors propagate to the caller.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
