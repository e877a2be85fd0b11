"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Instances are frozen: changes go through ``model_copy(update=...)``, which
    lets a cloned forest share untouched nodes with the one it came from.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
