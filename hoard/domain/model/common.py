"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity validated by pydantic.

    Services never mutate an entity. An update rebuilds it with
    `model_validate({**entity.model_dump(), **changes})` so field rules are
    checked again, and hands the new instance to its repository.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
